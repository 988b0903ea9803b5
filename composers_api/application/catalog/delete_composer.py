"""
Use case: Delete a composer.

Hard delete; the removed record is returned for logging and display.
"""

import logging

from composers_api.domain.catalog.entities import Composer
from composers_api.domain.catalog.failures import StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

logger = logging.getLogger(__name__)


class DeleteComposerUseCase:
    def __init__(self, repository: ComposerRepository) -> None:
        self._repository = repository

    def execute(self, composer_id: str) -> StoreResult[Composer]:
        result = self._repository.delete_by_id(composer_id)
        if result.ok:
            logger.info("Deleted composer %s (%s)", composer_id, result.value.name)
        return result
