"""
Errors for the auth bounded context.

Business errors use the 1xxx range reserved for user-related failures.
InvalidTokenError is not a business error: the interface layer turns it
into a 401 protocol fault.
"""

from cats_api.shared.errors.business import BusinessError

USER_ALREADY_EXISTS = 1001
INVALID_CAPTCHA = 1002
DEFAULT_ROLE_MISSING = 1003
INVALID_CREDENTIALS = 1004


class UserAlreadyExistsError(BusinessError):
    """Raised when registering an email that is already taken."""

    def __init__(self, email: str) -> None:
        super().__init__(USER_ALREADY_EXISTS, "User already exists", {"email": email})
        self.email = email


class InvalidCaptchaError(BusinessError):
    """Raised when the email captcha is wrong, used, or expired."""

    def __init__(self) -> None:
        super().__init__(INVALID_CAPTCHA, "Invalid or expired captcha")


class DefaultRoleMissingError(BusinessError):
    """Raised when the role given to new users has not been seeded."""

    def __init__(self, role: str) -> None:
        super().__init__(
            DEFAULT_ROLE_MISSING, "Default role is not configured", {"role": role}
        )
        self.role = role


class InvalidCredentialsError(BusinessError):
    """Raised on unknown email or wrong password. Deliberately vague."""

    def __init__(self) -> None:
        super().__init__(INVALID_CREDENTIALS, "Invalid email or password")


class InvalidTokenError(Exception):
    """Raised when a bearer token cannot be verified."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)
