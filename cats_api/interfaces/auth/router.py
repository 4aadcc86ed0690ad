"""
FastAPI router for the auth bounded context.

All routes delegate to use cases. No business logic here.
"""

from fastapi import APIRouter, Depends, Query

from cats_api.application.auth.dtos import LoginCommand, RegisterUserCommand
from cats_api.application.auth.login_user import LoginUserUseCase
from cats_api.application.auth.register_user import RegisterUserUseCase
from cats_api.application.auth.send_email_captcha import SendEmailCaptchaUseCase
from cats_api.domain.auth.entities import AuthenticatedUser
from cats_api.interfaces.auth.dependencies import (
    get_current_user,
    get_login_user_use_case,
    get_register_user_use_case,
    get_send_email_captcha_use_case,
)
from cats_api.interfaces.auth.schemas import (
    EMAIL_MAX_LEN,
    EMAIL_PATTERN,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from cats_api.shared.routing import EnvelopeRoute

router = APIRouter(prefix="/auth", tags=["auth"], route_class=EnvelopeRoute)


@router.get(
    "/email-captcha",
    summary="Send a registration captcha",
    description="Email a one-time code that must accompany registration.",
)
def send_email_captcha(
    email: str = Query(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN),
    use_case: SendEmailCaptchaUseCase = Depends(get_send_email_captcha_use_case),
) -> None:
    use_case.execute(email)


@router.post("/register", summary="Register a user")
def register(
    request: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> UserResponse:
    """Create an account with the default role."""
    result = use_case.execute(
        RegisterUserCommand(
            username=request.username,
            email=request.email,
            password=request.password,
            captcha=request.captcha,
        )
    )
    return UserResponse(
        id=result.id,
        username=result.username,
        email=result.email,
        created_at=result.created_at,
        updated_at=result.updated_at,
    )


@router.post("/login", summary="Log in")
def login(
    request: LoginRequest,
    use_case: LoginUserUseCase = Depends(get_login_user_use_case),
) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    result = use_case.execute(
        LoginCommand(email=request.email, password=request.password)
    )
    return TokenResponse(
        access_token=result.access_token,
        token_type=result.token_type,
        expires_in=result.expires_in,
    )


@router.get("/me", summary="Current user")
def me(user: AuthenticatedUser = Depends(get_current_user)) -> MeResponse:
    return MeResponse(
        id=user.id, username=user.username, email=user.email, roles=list(user.roles)
    )
