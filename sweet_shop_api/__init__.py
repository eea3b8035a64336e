"""
Top‑level package for the Sweet Shop API.

This file makes ``sweet_shop_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``sweet_shop_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
