"""
Use case: Remove a cat from the catalog.

Input: cat ID
Output: None
Side effects: Deletes one cat.
Failure cases: CatNotFoundError.
"""

import logging

from cats_api.domain.cats.errors import CatNotFoundError
from cats_api.domain.cats.ports import CatRepository

logger = logging.getLogger(__name__)


class DeleteCatUseCase:
    """Deletes a cat, failing if it does not exist."""

    def __init__(self, cat_repo: CatRepository) -> None:
        self._cat_repo = cat_repo

    def execute(self, cat_id: int) -> None:
        if not self._cat_repo.delete(cat_id):
            raise CatNotFoundError(cat_id)
        logger.info("Deleted cat id=%d", cat_id)
