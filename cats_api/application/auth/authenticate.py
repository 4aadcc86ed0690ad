"""
Use case: Resolve the user behind a bearer token.

Input: raw token string
Output: AuthenticatedUser
Side effects: None.
Failure cases: InvalidTokenError (bad token, or its user no longer exists).
"""

from cats_api.domain.auth.entities import AuthenticatedUser
from cats_api.domain.auth.errors import InvalidTokenError
from cats_api.domain.auth.ports import TokenService, UserRepository


class AuthenticateUseCase:
    """Verifies a token and loads the current user with their roles."""

    def __init__(self, user_repo: UserRepository, token_service: TokenService) -> None:
        self._user_repo = user_repo
        self._token_service = token_service

    def execute(self, token: str) -> AuthenticatedUser:
        user_id = self._token_service.verify(token)
        user = self._user_repo.get_by_id(user_id)
        if user is None:
            raise InvalidTokenError("User does not exist or has been disabled")
        return AuthenticatedUser(
            id=user.id, email=user.email, username=user.username, roles=user.roles
        )
