"""Shared fixtures.

Every test gets a fresh ``Database`` seeded with three sweets:

* ``t1`` Gummy Worms, Gummy, 1.50, 50 in stock
* ``t2`` Milk Chocolate Bar, Chocolate, 3.00, 10 in stock
* ``t3`` Sour Drops, Hard Candy, 0.50, sold out
"""

from __future__ import annotations

from typing import Dict

import pytest
from fastapi.testclient import TestClient

from sweet_shop_api.app.core.config import Settings
from sweet_shop_api.app.core.store import Database
from sweet_shop_api.app.main import create_app
from sweet_shop_api.app.models import Sweet
from sweet_shop_api.app.services.auth_service import AuthService
from sweet_shop_api.app.services.sweet_service import SweetService

SECRET = "test-secret"

SEED_SWEETS = [
    Sweet(id="t1", name="Gummy Worms", category="Gummy", price=1.50, quantity=50),
    Sweet(id="t2", name="Milk Chocolate Bar", category="Chocolate", price=3.00, quantity=10),
    Sweet(id="t3", name="Sour Drops", category="Hard Candy", price=0.50, quantity=0),
]


@pytest.fixture
def db() -> Database:
    database = Database()
    for sweet in SEED_SWEETS:
        # Copies, so mutations in one test never leak into the next.
        database.sweets.insert(Sweet(**sweet.to_dict()))
    return database


@pytest.fixture
def sweet_service(db: Database) -> SweetService:
    return SweetService(db)


@pytest.fixture
def auth_service(db: Database) -> AuthService:
    return AuthService(db, secret_key=SECRET, token_ttl_seconds=3600)


@pytest.fixture
def settings() -> Settings:
    return Settings(secret_key=SECRET, access_token_expire_minutes=60)


@pytest.fixture
def client(settings: Settings, db: Database) -> TestClient:
    return TestClient(create_app(settings=settings, db=db))


def _bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers(auth_service: AuthService) -> Dict[str, str]:
    """Headers for the first registered user, who is the admin."""
    auth_service.register("admin", "admin-pass")
    token, _ = auth_service.login("admin", "admin-pass")
    return _bearer(token)


@pytest.fixture
def user_headers(auth_service: AuthService, admin_headers: Dict[str, str]) -> Dict[str, str]:
    """Headers for a plain user (registered after the admin)."""
    auth_service.register("customer", "customer-pass")
    token, _ = auth_service.login("customer", "customer-pass")
    return _bearer(token)
