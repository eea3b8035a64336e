"""
Business logic for user registration and authentication.

``AuthService`` registers users (the very first one becomes the
administrator), checks credentials at login and issues signed access
tokens, and verifies tokens presented by clients.  Password hashing and
token signing are delegated to ``core.security``.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from ..core.config import settings
from ..core.exceptions import AlreadyExists, InvalidCredentials, InvalidOrExpiredToken
from ..core.security import create_access_token, decode_access_token, hash_password, verify_password
from ..core.store import Database
from ..models import Role, User

logger = logging.getLogger(__name__)


class AuthService:
    """Register, authenticate and verify users of the shop."""

    def __init__(
        self,
        db: Database,
        secret_key: Optional[str] = None,
        token_ttl_seconds: Optional[int] = None,
    ) -> None:
        self.db = db
        self.secret_key = secret_key or settings.secret_key
        self.token_ttl_seconds = (
            token_ttl_seconds if token_ttl_seconds is not None else settings.access_token_expire_minutes * 60
        )

    def register(self, username: str, password: str) -> User:
        """Create a new user.

        The first user ever registered receives the ``Admin`` role, every
        later one is a plain ``User``.  Usernames are unique and compared
        case‑sensitively.  The returned record still holds the password
        hash; the API layer must not send it to clients.
        """
        users = self.db.users
        # Hold the lock so two concurrent registrations cannot both see an
        # empty collection or the same free username.
        with users.lock:
            if users.find_one(username=username) is not None:
                raise AlreadyExists("User already exists")
            role = Role.ADMIN if users.count() == 0 else Role.USER
            user = users.create(
                {
                    "username": username,
                    "password_hash": hash_password(password),
                    "role": role,
                }
            )
        logger.info("User registered: %s with role %s", username, role.value)
        return user

    def login(self, username: str, password: str) -> Tuple[str, User]:
        """Check credentials and return ``(token, user)``.

        Unknown usernames and wrong passwords raise the same
        ``InvalidCredentials`` error; only the log tells them apart.
        """
        user = self.db.users.find_one(username=username)
        if user is None:
            logger.info("Login failed for %s: user not found", username)
            raise InvalidCredentials("Invalid credentials")
        if not verify_password(password, user.password_hash):
            logger.info("Login failed for %s: password incorrect", username)
            raise InvalidCredentials("Invalid credentials")

        claims = {"id": user.id, "username": user.username, "role": user.role.value}
        token = create_access_token(claims, expires_delta=self.token_ttl_seconds, secret_key=self.secret_key)
        logger.info("User logged in: %s", username)
        return token, user

    def verify(self, token: str) -> Dict[str, Any]:
        """Return the claims of a valid token."""
        claims = decode_access_token(token, secret_key=self.secret_key)
        if claims is None:
            logger.warning("Token verification failed")
            raise InvalidOrExpiredToken("Invalid or expired token")
        return claims
