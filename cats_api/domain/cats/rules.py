"""
Catalog rules shared by the create and update use cases.
"""

from cats_api.domain.cats.errors import InvalidCatAgeError

MIN_AGE = 0
MAX_AGE = 30


def ensure_valid_age(age: int) -> None:
    """Raise InvalidCatAgeError unless MIN_AGE <= age <= MAX_AGE."""
    if not (MIN_AGE <= age <= MAX_AGE):
        raise InvalidCatAgeError(age, MIN_AGE, MAX_AGE)
