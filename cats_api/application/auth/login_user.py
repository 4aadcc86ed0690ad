"""
Use case: Exchange email and password for an access token.

Input: LoginCommand
Output: TokenResult
Side effects: None.
Failure cases: InvalidCredentialsError.
"""

import logging

from cats_api.application.auth.dtos import LoginCommand, TokenResult
from cats_api.domain.auth.errors import InvalidCredentialsError
from cats_api.domain.auth.ports import PasswordHasher, TokenService, UserRepository

logger = logging.getLogger(__name__)


class LoginUserUseCase:
    """Verifies credentials and issues a signed token."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher
        self._token_service = token_service

    def execute(self, command: LoginCommand) -> TokenResult:
        """Run the login use case.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password. The
                two cases are indistinguishable to the caller.
        """
        user = self._user_repo.get_by_email(command.email)
        if user is None or not self._password_hasher.verify(
            command.password, user.password_hash
        ):
            raise InvalidCredentialsError()

        token = self._token_service.issue(user)
        logger.info("Issued access token for user id=%d", user.id)
        return TokenResult(
            access_token=token.token,
            token_type=token.token_type,
            expires_in=token.expires_in,
        )
