"""
Use case: Create a composer.

Input: ComposerDraft
Output: StoreResult[Composer] carrying the store-assigned id and timestamps
Side effects: Inserts one record.
Failure cases: CONFLICT (name taken), VALIDATION, STORE.
"""

import logging

from composers_api.domain.catalog.entities import Composer, ComposerDraft
from composers_api.domain.catalog.failures import StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

logger = logging.getLogger(__name__)


class CreateComposerUseCase:
    """Orchestrates creation of a new composer record."""

    def __init__(self, repository: ComposerRepository) -> None:
        """Initialize the use case.

        Args:
            repository: Store adapter for composer records.
        """
        self._repository = repository

    def execute(self, draft: ComposerDraft) -> StoreResult[Composer]:
        """Run the create composer use case.

        Args:
            draft: Validated client-settable fields.

        Returns:
            The created composer, or the store failure.
        """
        logger.info("Creating composer: name=%s", draft.name)
        result = self._repository.create(draft)
        if not result.ok:
            logger.info(
                "Composer %s not created: %s", draft.name, result.failure.kind.value
            )
        return result
