"""Tests for AuthService: registration, login and token verification."""

from __future__ import annotations

import pytest

from sweet_shop_api.app.core.exceptions import AlreadyExists, InvalidCredentials, InvalidOrExpiredToken
from sweet_shop_api.app.core.security import create_access_token
from sweet_shop_api.app.core.store import Database
from sweet_shop_api.app.models import Role
from sweet_shop_api.app.services.auth_service import AuthService

from .conftest import SECRET


class TestRegister:
    def test_first_user_is_admin(self, auth_service: AuthService) -> None:
        user = auth_service.register("alice", "pw")
        assert user.role == Role.ADMIN
        assert user.is_admin

    def test_later_users_are_plain_users(self, auth_service: AuthService) -> None:
        auth_service.register("alice", "pw")
        assert auth_service.register("bob", "pw").role == Role.USER
        assert auth_service.register("carol", "pw").role == Role.USER

    def test_duplicate_username(self, auth_service: AuthService, db: Database) -> None:
        auth_service.register("alice", "pw")
        with pytest.raises(AlreadyExists, match="User already exists"):
            auth_service.register("alice", "other")
        assert db.users.count() == 1

    def test_usernames_are_case_sensitive(self, auth_service: AuthService) -> None:
        auth_service.register("alice", "pw")
        assert auth_service.register("Alice", "pw").role == Role.USER

    def test_password_is_hashed(self, auth_service: AuthService) -> None:
        user = auth_service.register("alice", "plain-text")
        assert "plain-text" not in user.password_hash
        assert "$" in user.password_hash

    def test_ids_are_unique(self, auth_service: AuthService) -> None:
        first = auth_service.register("alice", "pw")
        second = auth_service.register("bob", "pw")
        assert first.id != second.id


class TestLogin:
    def test_success_returns_token_with_claims(self, auth_service: AuthService) -> None:
        registered = auth_service.register("alice", "pw")

        token, user = auth_service.login("alice", "pw")
        claims = auth_service.verify(token)

        assert user == registered
        assert claims["id"] == registered.id
        assert claims["username"] == "alice"
        assert claims["role"] == "Admin"
        assert claims["exp"] - claims["iat"] == 3600

    def test_wrong_password_and_unknown_user_are_indistinguishable(self, auth_service: AuthService) -> None:
        auth_service.register("alice", "pw")

        with pytest.raises(InvalidCredentials) as wrong_password:
            auth_service.login("alice", "nope")
        with pytest.raises(InvalidCredentials) as unknown_user:
            auth_service.login("mallory", "pw")

        assert type(wrong_password.value) is type(unknown_user.value)
        assert wrong_password.value.message == unknown_user.value.message


class TestVerify:
    def test_rejects_garbage(self, auth_service: AuthService) -> None:
        with pytest.raises(InvalidOrExpiredToken, match="Invalid or expired token"):
            auth_service.verify("not-a-token")

    def test_rejects_other_secret(self, auth_service: AuthService) -> None:
        token = create_access_token({"id": "x", "username": "x", "role": "Admin"}, secret_key="other")
        with pytest.raises(InvalidOrExpiredToken):
            auth_service.verify(token)

    def test_rejects_expired(self, auth_service: AuthService) -> None:
        token = create_access_token({"id": "x", "username": "x", "role": "User"}, expires_delta=-10, secret_key=SECRET)
        with pytest.raises(InvalidOrExpiredToken):
            auth_service.verify(token)

    def test_token_from_other_instance_with_same_secret(self, db: Database) -> None:
        issuer = AuthService(db, secret_key=SECRET)
        issuer.register("alice", "pw")
        token, _ = issuer.login("alice", "pw")

        assert AuthService(Database(), secret_key=SECRET).verify(token)["username"] == "alice"
