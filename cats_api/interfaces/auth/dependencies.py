"""
Dependency injection for the auth bounded context.

Wires the user repository, hashing, tokens, captchas and mail into the
use cases, and provides the guards that protect other routers:

- get_current_user: resolves the bearer token, 401 when absent or invalid.
- require_roles: 403 business error when the user lacks every given role.
"""

import logging
from typing import Callable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from cats_api.application.auth.authenticate import AuthenticateUseCase
from cats_api.application.auth.login_user import LoginUserUseCase
from cats_api.application.auth.register_user import RegisterUserUseCase
from cats_api.application.auth.send_email_captcha import SendEmailCaptchaUseCase
from cats_api.core.config import settings
from cats_api.domain.auth.entities import AuthenticatedUser
from cats_api.domain.auth.errors import InvalidTokenError
from cats_api.domain.auth.ports import (
    CaptchaStore,
    PasswordHasher,
    TokenService,
    UserRepository,
)
from cats_api.domain.email.ports import EmailSender
from cats_api.infrastructure.auth.captcha_store import InMemoryCaptchaStore
from cats_api.infrastructure.auth.password_hasher import BcryptPasswordHasher
from cats_api.infrastructure.auth.token_service import JoseTokenService
from cats_api.infrastructure.auth.user_repository import SqlAlchemyUserRepository
from cats_api.infrastructure.email.smtp_sender import SmtpEmailSender
from cats_api.interfaces.dependencies import get_session
from cats_api.shared.errors import BusinessError

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

# Captchas must outlive a single request
_captcha_store = InMemoryCaptchaStore()


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_user_repository(session: Session = Depends(get_session)) -> UserRepository:
    return SqlAlchemyUserRepository(session)


def get_token_service() -> TokenService:
    return JoseTokenService(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_minutes=settings.jwt_expires_minutes,
    )


def get_password_hasher() -> PasswordHasher:
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_captcha_store() -> CaptchaStore:
    return _captcha_store


def get_email_sender() -> EmailSender:
    return SmtpEmailSender(
        host=settings.nodemailer_host,
        port=settings.nodemailer_port,
        username=settings.nodemailer_auth_user,
        password=settings.nodemailer_auth_pass,
        timeout=settings.nodemailer_timeout_seconds,
    )


def get_send_email_captcha_use_case(
    captcha_store: CaptchaStore = Depends(get_captcha_store),
    email_sender: EmailSender = Depends(get_email_sender),
) -> SendEmailCaptchaUseCase:
    return SendEmailCaptchaUseCase(
        captcha_store=captcha_store,
        email_sender=email_sender,
        ttl_seconds=settings.captcha_ttl_seconds,
    )


def get_register_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    captcha_store: CaptchaStore = Depends(get_captcha_store),
) -> RegisterUserUseCase:
    return RegisterUserUseCase(
        user_repo=user_repo,
        password_hasher=password_hasher,
        captcha_store=captcha_store,
    )


def get_login_user_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    token_service: TokenService = Depends(get_token_service),
) -> LoginUserUseCase:
    return LoginUserUseCase(
        user_repo=user_repo,
        password_hasher=password_hasher,
        token_service=token_service,
    )


def get_authenticate_use_case(
    user_repo: UserRepository = Depends(get_user_repository),
    token_service: TokenService = Depends(get_token_service),
) -> AuthenticateUseCase:
    return AuthenticateUseCase(user_repo=user_repo, token_service=token_service)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    use_case: AuthenticateUseCase = Depends(get_authenticate_use_case),
) -> AuthenticatedUser:
    """Resolve the user behind the ``Authorization: Bearer`` header.

    Raises:
        HTTPException: 401 if the header is missing, the token does not
            verify, or its user no longer exists.
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")

    try:
        return use_case.execute(credentials.credentials)
    except InvalidTokenError as e:
        logger.info("Rejected bearer token: %s", e.reason)
        raise _unauthorized(e.reason)


def require_roles(*roles: str) -> Callable[..., AuthenticatedUser]:
    """Build a dependency that admits users holding any of ``roles``.

    Usage:
        @router.post("/", dependencies=[Depends(require_roles("super-admin"))])
    """

    def checker(
        user: AuthenticatedUser = Depends(get_current_user),
    ) -> AuthenticatedUser:
        if not user.has_any_role(*roles):
            logger.info(
                "User id=%d denied; needs one of %s", user.id, ", ".join(roles)
            )
            raise BusinessError.forbidden("No permission to access this resource")
        return user

    return checker
