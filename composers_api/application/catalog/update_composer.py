"""
Use case: Replace a composer's fields.

Input: UpdateComposerCommand
Output: StoreResult[Composer] as it reads after the update
Side effects: Rewrites one record.
Failure cases: NOT_FOUND, VALIDATION, CONFLICT (renamed onto a taken name), STORE.
"""

import logging

from composers_api.application.catalog.dtos import UpdateComposerCommand
from composers_api.domain.catalog.entities import Composer
from composers_api.domain.catalog.failures import StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

logger = logging.getLogger(__name__)


class UpdateComposerUseCase:
    """Orchestrates a full replace of a composer's validated fields."""

    def __init__(self, repository: ComposerRepository) -> None:
        self._repository = repository

    def execute(self, command: UpdateComposerCommand) -> StoreResult[Composer]:
        logger.info("Updating composer %s", command.composer_id)
        return self._repository.update_by_id(command.composer_id, command.draft)
