"""
Pydantic models for user data.

Defines the credentials payload accepted by registration and login and
the public view of a user.  The password hash stored on ``models.User``
is never part of a response schema.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..models import Role


class UserCredentials(BaseModel):
    """Body of the register and login endpoints.

    Both fields are optional at the schema level so that the endpoints
    can answer a missing value with HTTP 400 rather than 422.
    """

    username: Optional[str] = Field(None, examples=["alice"])
    password: Optional[str] = Field(None, examples=["strongpassword"])


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
    role: Role

    model_config = {
        "from_attributes": True,
    }


class RegisterResponse(BaseModel):
    message: str
    user: UserRead


class LoginResponse(BaseModel):
    message: str
    user: UserRead
    token: str
