"""
Use case: Fetch one cat by ID.

Input: cat ID
Output: CatResult
Side effects: None (read-only query).
Failure cases: CatNotFoundError.
"""

from cats_api.application.cats.dtos import CatResult
from cats_api.domain.cats.errors import CatNotFoundError
from cats_api.domain.cats.ports import CatRepository


class GetCatUseCase:
    """Read-only lookup of a single cat."""

    def __init__(self, cat_repo: CatRepository) -> None:
        self._cat_repo = cat_repo

    def execute(self, cat_id: int) -> CatResult:
        cat = self._cat_repo.get_by_id(cat_id)
        if cat is None:
            raise CatNotFoundError(cat_id)
        return CatResult.from_entity(cat)
