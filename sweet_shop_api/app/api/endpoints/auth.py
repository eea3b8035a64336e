"""
Authentication endpoints.

Registration is open to everyone; the first account created becomes
the shop administrator.  Login returns a bearer token valid for one
day by default.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from ...core.exceptions import SweetShopError
from ...schemas.user import LoginResponse, RegisterResponse, UserCredentials, UserRead
from ...services.auth_service import AuthService
from ..deps import get_auth_service, raise_http_error

router = APIRouter()


def _require_credentials(payload: UserCredentials) -> None:
    if not payload.username or not payload.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username and password are required.",
        )


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service),
) -> RegisterResponse:
    """Register a new user and return it without the password hash."""
    _require_credentials(payload)
    try:
        user = auth_service.register(payload.username, payload.password)
    except SweetShopError as exc:
        raise_http_error(exc)
    return RegisterResponse(
        message=f"User registered successfully. Role: {user.role.value}",
        user=UserRead.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    payload: UserCredentials,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """Authenticate a user and return an access token."""
    _require_credentials(payload)
    try:
        token, user = auth_service.login(payload.username, payload.password)
    except SweetShopError as exc:
        raise_http_error(exc)
    return LoginResponse(
        message="Login successful.",
        user=UserRead.model_validate(user),
        token=token,
    )
