"""
Domain entities for the auth bounded context.
"""

from dataclasses import dataclass, field
from datetime import datetime

DEFAULT_ROLE = "user"
ADMIN_ROLE = "super-admin"


@dataclass(frozen=True)
class User:
    """A registered user. ``password_hash`` never leaves the service."""

    id: int
    username: str
    email: str
    password_hash: str
    roles: tuple[str, ...] = field(default_factory=tuple)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity attached to a request after token verification."""

    id: int
    email: str
    username: str
    roles: tuple[str, ...] = field(default_factory=tuple)

    def has_any_role(self, *roles: str) -> bool:
        return any(role in self.roles for role in roles)


@dataclass(frozen=True)
class AccessToken:
    """A signed bearer credential."""

    token: str
    expires_in: int
    token_type: str = "bearer"
