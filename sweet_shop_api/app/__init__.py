"""
Application package initializer.

The API is organised into small layers: ``core`` holds configuration,
security primitives and the in‑memory record store, ``services``
contains the business rules for credentials and inventory, ``schemas``
defines request and response payloads and ``api`` wires everything to
FastAPI routes.
"""

from .main import app  # noqa: F401
