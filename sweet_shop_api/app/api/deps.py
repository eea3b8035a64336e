"""
FastAPI dependencies shared by the endpoints.

The application's ``Database`` lives on ``app.state.db`` (see
``main.create_app``); the dependencies below build services around it
and implement the bearer‑token and role gates.
"""

import logging
from typing import Any, Dict, NoReturn

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import (
    AlreadyExists,
    InsufficientStock,
    InvalidArgument,
    InvalidCredentials,
    InvalidOrExpiredToken,
    NotFound,
    SweetShopError,
)
from ..core.store import Database
from ..models import Role
from ..services.auth_service import AuthService
from ..services.sweet_service import SweetService

logger = logging.getLogger(__name__)

# Status code used for each domain error.
ERROR_STATUS = {
    AlreadyExists: status.HTTP_409_CONFLICT,
    InvalidCredentials: status.HTTP_401_UNAUTHORIZED,
    InvalidOrExpiredToken: status.HTTP_401_UNAUTHORIZED,
    NotFound: status.HTTP_404_NOT_FOUND,
    InvalidArgument: status.HTTP_400_BAD_REQUEST,
    InsufficientStock: status.HTTP_400_BAD_REQUEST,
}


def raise_http_error(exc: SweetShopError) -> NoReturn:
    """Translate a domain error into an ``HTTPException``."""
    status_code = ERROR_STATUS.get(type(exc))
    if status_code is None:
        # Not a known client error; let the generic 500 handler log it.
        raise exc
    raise HTTPException(status_code=status_code, detail=exc.message) from exc


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_auth_service(request: Request, db: Database = Depends(get_db)) -> AuthService:
    return AuthService(
        db,
        secret_key=request.app.state.settings.secret_key,
        token_ttl_seconds=request.app.state.settings.access_token_expire_minutes * 60,
    )


def get_sweet_service(db: Database = Depends(get_db)) -> SweetService:
    return SweetService(db)


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth_service: AuthService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """Dependency that returns the claims of the authenticated caller.

    Raises HTTP 401 if the ``Authorization`` header is missing or the
    bearer token is invalid or expired.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return auth_service.verify(credentials.credentials)
    except InvalidOrExpiredToken as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.message,
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


def require_admin(current_user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
    """Dependency that lets only Admin callers through; others get HTTP 403."""
    if current_user.get("role") != Role.ADMIN.value:
        logger.info("User %s denied: role %s", current_user.get("username"), current_user.get("role"))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized as an admin",
        )
    return current_user
