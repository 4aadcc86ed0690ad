"""
Pydantic schemas for auth API request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from cats_api.interfaces.schemas import CamelModel

USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 6
# bcrypt only reads the first 72 bytes
PASSWORD_MAX_LEN = 64
EMAIL_MAX_LEN = 254
EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class RegisterRequest(CamelModel):
    """Request schema for registration."""

    username: str = Field(..., min_length=1, max_length=USERNAME_MAX_LEN)
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=PASSWORD_MIN_LEN, max_length=PASSWORD_MAX_LEN)
    captcha: str = Field(..., min_length=1, description="Code sent by email")


class LoginRequest(CamelModel):
    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1, max_length=PASSWORD_MAX_LEN)


class TokenResponse(CamelModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(..., description="Token lifetime in seconds")


class UserResponse(CamelModel):
    """A newly registered user. Never includes the password hash."""

    id: int
    username: str
    email: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MeResponse(CamelModel):
    """The identity behind the current bearer token."""

    id: int
    username: str
    email: str
    roles: list[str]
