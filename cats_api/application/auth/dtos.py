"""
Data Transfer Objects for the auth application layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from cats_api.domain.auth.entities import User


@dataclass(frozen=True)
class RegisterUserCommand:
    """Input DTO for registration. The captcha was emailed beforehand."""

    username: str
    email: str
    password: str
    captcha: str


@dataclass(frozen=True)
class LoginCommand:
    email: str
    password: str


@dataclass(frozen=True)
class RegisteredUserResult:
    """Output DTO for a new user. Carries no password material."""

    id: int
    username: str
    email: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    @classmethod
    def from_entity(cls, user: User) -> "RegisteredUserResult":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


@dataclass(frozen=True)
class TokenResult:
    access_token: str
    token_type: str
    expires_in: int
