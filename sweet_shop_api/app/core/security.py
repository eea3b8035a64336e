"""
Security helpers for password hashing and JWT access tokens.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed
arbitrary claims plus the issue time (``iat``) and an expiration
timestamp (``exp``).  Passwords are hashed with PBKDF2‑HMAC‑SHA256
and a random per‑password salt.

Both primitives are opaque to the rest of the application: services
only call ``hash_password``/``verify_password`` and
``create_access_token``/``decode_access_token``.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from typing import Any, Dict, Optional

from .config import settings

PBKDF2_ITERATIONS = 100_000
_HEADER = {"alg": "HS256", "typ": "JWT"}


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(
    data: Dict[str, Any],
    expires_delta: Optional[int] = None,
    secret_key: Optional[str] = None,
) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with ``iat`` and ``exp`` fields (UNIX
    timestamps).  The token is a string of the form
    ``header.payload.signature``, where each part is base64url encoded.
    Clients send it back as ``Authorization: Bearer <token>``.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"id": ..., "role": "Admin"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60``.
    secret_key : Optional[str]
        Signing key.  Defaults to ``settings.secret_key``.

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    now = int(time.time())
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    to_encode["iat"] = now
    to_encode["exp"] = now + exp_seconds
    header_b64 = _b64_url_encode(json.dumps(_HEADER, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature = _sign(signing_input, secret_key or settings.secret_key)
    return f"{header_b64}.{payload_b64}.{_b64_url_encode(signature)}"


def decode_access_token(token: str, secret_key: Optional[str] = None) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Checks the header algorithm, the HMAC signature and the ``exp``
    claim.  Returns the payload dictionary if the token is valid,
    otherwise ``None``.
    """
    parts = token.split(".")
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    try:
        header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
        if not isinstance(header, dict) or header.get("alg") != _HEADER["alg"]:
            return None
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, secret_key or settings.secret_key)
        # Constant‑time comparison
        if not hmac.compare_digest(expected_sig, _b64_url_decode(signature_b64)):
            return None
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
        if not isinstance(data, dict) or data.get("exp") is None:
            return None
        if int(data["exp"]) < int(time.time()):
            return None
        return data
    except (ValueError, TypeError):
        # Malformed base64, JSON or UTF‑8.
        return None


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash in hex separated by
    ``$``, which is everything ``verify_password`` needs.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` for a mismatch and for a stored value that is
    not in ``salthex$hashhex`` form.
    """
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
