"""
Top‑level API router.

Aggregates the domain routers under a unified prefix (``/api`` is
applied in ``main.create_app``).  When new domains are introduced,
include their routers here.
"""

from fastapi import APIRouter

from .endpoints import auth, sweets

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(sweets.router, prefix="/sweets", tags=["sweets"])
