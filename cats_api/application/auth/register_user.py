"""
Use case: Register a new user.

Input: RegisterUserCommand
Output: RegisteredUserResult
Side effects: Consumes the captcha, inserts one user with the default role.
Failure cases: UserAlreadyExistsError, InvalidCaptchaError,
    DefaultRoleMissingError.
"""

import logging

from cats_api.application.auth.dtos import RegisteredUserResult, RegisterUserCommand
from cats_api.domain.auth.entities import DEFAULT_ROLE
from cats_api.domain.auth.errors import (
    DefaultRoleMissingError,
    InvalidCaptchaError,
    UserAlreadyExistsError,
)
from cats_api.domain.auth.ports import CaptchaStore, PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Orchestrates user registration.

    Checks run in order: duplicate email, captcha, default role. The
    captcha is only consumed once the email is known to be free.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        captcha_store: CaptchaStore,
        default_role: str = DEFAULT_ROLE,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._captcha_store = captcha_store
        self._default_role = default_role

    def execute(self, command: RegisterUserCommand) -> RegisteredUserResult:
        if self._user_repo.get_by_email(command.email) is not None:
            raise UserAlreadyExistsError(command.email)

        if not self._captcha_store.consume(command.email, command.captcha):
            raise InvalidCaptchaError()

        if not self._user_repo.role_exists(self._default_role):
            raise DefaultRoleMissingError(self._default_role)

        user = self._user_repo.create(
            username=command.username,
            email=command.email,
            password_hash=self._password_hasher.hash(command.password),
            roles=[self._default_role],
        )
        logger.info("Registered user id=%d", user.id)
        return RegisteredUserResult.from_entity(user)
