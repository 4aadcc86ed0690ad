"""
Port interfaces (ABCs) for the auth bounded context.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cats_api.domain.auth.entities import AccessToken, User


class UserRepository(ABC):
    """Port for persisting and querying users and their roles."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        raise NotImplementedError

    @abstractmethod
    def role_exists(self, code: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def create(
        self, username: str, email: str, password_hash: str, roles: list[str]
    ) -> User:
        """Persist a user with the given role codes."""
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        raise NotImplementedError


class TokenService(ABC):
    """Port for issuing and verifying access tokens."""

    @abstractmethod
    def issue(self, user: User) -> AccessToken:
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> int:
        """Return the user ID carried by a valid token.

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired.
        """
        raise NotImplementedError


class CaptchaStore(ABC):
    """Port for short-lived email captchas."""

    @abstractmethod
    def save(self, email: str, code: str, ttl_seconds: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def consume(self, email: str, code: str) -> bool:
        """Return True and forget the captcha if it matches and is unexpired."""
        raise NotImplementedError
