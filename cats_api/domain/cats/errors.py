"""
Business errors for the cats bounded context.

All are BusinessError subclasses: reported at HTTP 200 with the
business code in the envelope.
"""

from cats_api.shared.errors.business import BusinessError
from cats_api.shared.response import ResponseCode


class CatNotFoundError(BusinessError):
    """Raised when no cat has the requested ID."""

    def __init__(self, cat_id: int) -> None:
        super().__init__(
            ResponseCode.NOT_FOUND, f"Cat with ID {cat_id} not found", {"id": cat_id}
        )
        self.cat_id = cat_id


class DuplicateCatNameError(BusinessError):
    """Raised when another cat already uses the name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            ResponseCode.BAD_REQUEST, "Cat name already exists", {"existingName": name}
        )
        self.name = name


class InvalidCatAgeError(BusinessError):
    """Raised when an age falls outside the accepted range."""

    def __init__(self, age: int, minimum: int, maximum: int) -> None:
        super().__init__(
            ResponseCode.BAD_REQUEST,
            f"Cat age must be between {minimum} and {maximum}",
            {"age": age, "min": minimum, "max": maximum},
        )
        self.age = age
