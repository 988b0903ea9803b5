"""
Use case: List composers.

Input: ListComposersQuery (filters, sort, offset, limit)
Output: StoreResult[list[Composer]]
Side effects: None (read-only query).

The store returns the full matching set; offset and limit are applied
here, after retrieval.
"""

import logging

from composers_api.application.catalog.dtos import ListComposersQuery
from composers_api.domain.catalog.entities import Composer
from composers_api.domain.catalog.failures import StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

logger = logging.getLogger(__name__)


class ListComposersUseCase:
    """Orchestrates a filtered, sorted and paginated composer listing."""

    def __init__(self, repository: ComposerRepository) -> None:
        """Initialize the use case.

        Args:
            repository: Store adapter for composer records.
        """
        self._repository = repository

    def execute(self, query: ListComposersQuery) -> StoreResult[list[Composer]]:
        """Run the list composers use case.

        Args:
            query: Filters, sort order and the page window.

        Returns:
            The page of composers, or the store failure.
        """
        logger.info(
            "Listing composers: sort=%s%s, offset=%d, limit=%d",
            "-" if query.sort.descending else "",
            query.sort.field.value,
            query.offset,
            query.limit,
        )

        result = self._repository.find(query.criteria, query.sort)
        if not result.ok:
            return result

        page = result.value[query.offset : query.offset + query.limit]
        return StoreResult.success(page)
