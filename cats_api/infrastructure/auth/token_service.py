"""
Adapter: JWT access tokens via python-jose.

Tokens carry ``sub`` (user ID as a string), ``email``, ``iat`` and ``exp``.
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from cats_api.domain.auth.entities import AccessToken, User
from cats_api.domain.auth.errors import InvalidTokenError
from cats_api.domain.auth.ports import TokenService

logger = logging.getLogger(__name__)


class JoseTokenService(TokenService):
    """HMAC-signed JWTs."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_minutes: int = 60) -> None:
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_minutes * 60

    def issue(self, user: User) -> AccessToken:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": str(user.id),
            "email": user.email,
            "iat": now,
            "exp": now + timedelta(seconds=self._expires_in),
        }
        token = jwt.encode(claims, self._secret, algorithm=self._algorithm)
        return AccessToken(token=token, expires_in=self._expires_in)

    def verify(self, token: str) -> int:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except JWTError as e:
            logger.debug("JWT validation failed: %s", e)
            raise InvalidTokenError("Invalid token")

        subject = payload.get("sub")
        try:
            return int(subject)
        except (TypeError, ValueError):
            raise InvalidTokenError("Invalid token: malformed user ID")
