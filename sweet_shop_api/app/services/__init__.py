"""
Service layer abstraction.

Each service encapsulates the business logic for one domain and
receives the record store it works on at construction time.  Swapping
the in‑memory store for a persistent backend does not require
touching the services or the API handlers.
"""

from .auth_service import AuthService
from .sweet_service import SweetService

__all__ = ["AuthService", "SweetService"]
