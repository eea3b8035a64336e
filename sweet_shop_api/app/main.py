"""
Main entrypoint for the Sweet Shop API.

This module assembles the FastAPI application: it sets up logging,
creates the in‑memory ``Database`` owned by the application, enables
CORS for the browser frontend and includes the API router under
``/api``.  The ``create_app`` function builds and configures the app,
which is then instantiated at module import time as ``app``::

    uvicorn sweet_shop_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from .api.router import router as api_router
from .core.config import DEFAULT_SECRET_KEY, Settings, settings as default_settings
from .core.logging_config import setup_logging
from .core.store import Database

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, db: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the settings read from the
        environment.
    db : Optional[Database]
        Record store to serve.  A fresh, empty one is created when
        omitted; all data lives only as long as this application.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file or None)

    if settings.secret_key == DEFAULT_SECRET_KEY:
        logger.warning("SECRET_KEY is not set; tokens are signed with the development default")

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.db = db if db is not None else Database()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
    )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})

    @app.get("/", response_class=PlainTextResponse, include_in_schema=False)
    async def health() -> str:
        return "Sweet Shop API is running!"

    app.include_router(api_router, prefix="/api")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
