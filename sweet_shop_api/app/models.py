"""
Records kept in the in‑memory store.

These are the stored shapes, not the API payloads: ``User`` carries
the password hash, which the schemas in ``schemas.user`` never expose.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict


class Role(str, Enum):
    """Access levels.  The first registered user is the admin."""

    ADMIN = "Admin"
    USER = "User"


@dataclass
class Sweet:
    id: str
    name: str
    category: str
    price: float
    quantity: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class User:
    id: str
    username: str
    password_hash: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
