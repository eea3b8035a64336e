"""Tests for the password hashing and token primitives."""

from __future__ import annotations

import base64
import json

from sweet_shop_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SECRET = "unit-secret"


def _encode(part: dict) -> str:
    return base64.urlsafe_b64encode(json.dumps(part).encode()).rstrip(b"=").decode()


class TestPasswords:
    def test_roundtrip(self) -> None:
        hashed = hash_password("s3cret")
        assert verify_password("s3cret", hashed)
        assert not verify_password("S3cret", hashed)

    def test_salted(self) -> None:
        assert hash_password("same") != hash_password("same")

    def test_malformed_hash_does_not_verify(self) -> None:
        assert not verify_password("pw", "not-a-hash")
        assert not verify_password("pw", "zz$zz")


class TestTokens:
    def test_claims_are_preserved(self) -> None:
        token = create_access_token({"id": "1", "role": "Admin"}, expires_delta=60, secret_key=SECRET)
        claims = decode_access_token(token, secret_key=SECRET)

        assert claims["id"] == "1"
        assert claims["role"] == "Admin"
        assert claims["exp"] == claims["iat"] + 60

    def test_tampered_payload_is_rejected(self) -> None:
        token = create_access_token({"role": "User"}, expires_delta=60, secret_key=SECRET)
        header, _, signature = token.split(".")
        forged = ".".join([header, _encode({"role": "Admin", "exp": 9999999999}), signature])

        assert decode_access_token(forged, secret_key=SECRET) is None

    def test_unsigned_token_is_rejected(self) -> None:
        token = ".".join([_encode({"alg": "none", "typ": "JWT"}), _encode({"role": "Admin", "exp": 9999999999}), ""])
        assert decode_access_token(token, secret_key=SECRET) is None

    def test_expired_token_is_rejected(self) -> None:
        token = create_access_token({"id": "1"}, expires_delta=-1, secret_key=SECRET)
        assert decode_access_token(token, secret_key=SECRET) is None

    def test_malformed_tokens_are_rejected(self) -> None:
        for token in ["", "abc", "a.b", "a.b.c", "!!!.###.$$$"]:
            assert decode_access_token(token, secret_key=SECRET) is None
