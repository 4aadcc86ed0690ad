"""
Use case: Partially update a cat.

Input: UpdateCatCommand (cat_id, changes)
Output: CatResult
Side effects: Updates one cat.
Failure cases: CatNotFoundError, InvalidCatAgeError, DuplicateCatNameError.
"""

import logging

from cats_api.application.cats.dtos import CatResult, UpdateCatCommand
from cats_api.domain.cats.errors import CatNotFoundError, DuplicateCatNameError
from cats_api.domain.cats.ports import CatRepository
from cats_api.domain.cats.rules import ensure_valid_age

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = frozenset({"name", "age", "breed", "description"})
NULLABLE_FIELDS = frozenset({"description"})


class UpdateCatUseCase:
    """Applies the fields a caller sent to an existing cat."""

    def __init__(self, cat_repo: CatRepository) -> None:
        self._cat_repo = cat_repo

    def execute(self, command: UpdateCatCommand) -> CatResult:
        """Run the update cat use case.

        Unknown keys in ``changes`` are ignored, and so are nulls for
        required fields. Renaming a cat to its own current name is allowed.
        """
        current = self._cat_repo.get_by_id(command.cat_id)
        if current is None:
            raise CatNotFoundError(command.cat_id)

        changes = {
            k: v
            for k, v in command.changes.items()
            if k in UPDATABLE_FIELDS and (v is not None or k in NULLABLE_FIELDS)
        }

        if "age" in changes:
            ensure_valid_age(changes["age"])

        new_name = changes.get("name")
        if new_name is not None and new_name != current.name:
            existing = self._cat_repo.get_by_name(new_name)
            if existing is not None and existing.id != current.id:
                raise DuplicateCatNameError(new_name)

        updated = self._cat_repo.update(command.cat_id, changes)
        if updated is None:
            raise CatNotFoundError(command.cat_id)

        logger.info("Updated cat id=%d fields=%s", updated.id, sorted(changes))
        return CatResult.from_entity(updated)
