"""
Use case: Add a cat to the catalog.

Input: CreateCatCommand
Output: CatResult
Side effects: Inserts one cat.
Failure cases: InvalidCatAgeError, DuplicateCatNameError.
"""

import logging

from cats_api.application.cats.dtos import CatResult, CreateCatCommand
from cats_api.domain.cats.entities import NewCat
from cats_api.domain.cats.errors import DuplicateCatNameError
from cats_api.domain.cats.ports import CatRepository
from cats_api.domain.cats.rules import ensure_valid_age

logger = logging.getLogger(__name__)

INTERNAL_NOTES = "This is internal data"


class CreateCatUseCase:
    """Validates a new cat and persists it."""

    def __init__(self, cat_repo: CatRepository) -> None:
        self._cat_repo = cat_repo

    def execute(self, command: CreateCatCommand) -> CatResult:
        """Run the create cat use case.

        Raises:
            InvalidCatAgeError: If the age is outside the accepted range.
            DuplicateCatNameError: If the name is already taken.
        """
        ensure_valid_age(command.age)

        if self._cat_repo.get_by_name(command.name) is not None:
            raise DuplicateCatNameError(command.name)

        cat = self._cat_repo.add(
            NewCat(
                name=command.name,
                age=command.age,
                breed=command.breed,
                description=command.description,
                internal_notes=INTERNAL_NOTES,
            )
        )
        logger.info("Created cat id=%d name=%s", cat.id, cat.name)
        return CatResult.from_entity(cat)
