"""
Use case: List cats one page at a time.

Input: ListCatsQuery (page, page_size)
Output: CatPageResult
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from cats_api.application.cats.dtos import CatPageResult, CatResult, ListCatsQuery
from cats_api.domain.cats.ports import CatRepository

logger = logging.getLogger(__name__)


class ListCatsUseCase:
    """Orchestrates a paginated listing of the catalog."""

    def __init__(self, cat_repo: CatRepository) -> None:
        self._cat_repo = cat_repo

    def execute(self, query: ListCatsQuery) -> CatPageResult:
        """Run the list cats use case.

        Args:
            query: 1-based page number and page size.

        Returns:
            The requested page and the total number of cats.
        """
        logger.debug("Listing cats: page=%d, page_size=%d", query.page, query.page_size)

        offset = (query.page - 1) * query.page_size
        cats = self._cat_repo.list_page(offset=offset, limit=query.page_size)

        return CatPageResult(
            items=[CatResult.from_entity(cat) for cat in cats],
            page=query.page,
            page_size=query.page_size,
            total=self._cat_repo.count(),
        )
