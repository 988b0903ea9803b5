"""
Use case: Get a composer by id.

Input: composer id
Output: StoreResult[Composer]
Failure cases: NOT_FOUND, STORE.
"""

import logging

from composers_api.domain.catalog.entities import Composer
from composers_api.domain.catalog.failures import StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

logger = logging.getLogger(__name__)


class GetComposerUseCase:
    """Fetches a single composer."""

    def __init__(self, repository: ComposerRepository) -> None:
        self._repository = repository

    def execute(self, composer_id: str) -> StoreResult[Composer]:
        logger.info("Fetching composer %s", composer_id)
        return self._repository.get_by_id(composer_id)
