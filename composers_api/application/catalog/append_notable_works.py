"""
Use case: Append notable works to a composer.

Input: AppendNotableWorksCommand
Output: StoreResult[Composer] with the extended notable works
Side effects: Rewrites the notable works of one record.
Failure cases: NOT_FOUND, VALIDATION, STORE.
"""

import logging

from composers_api.application.catalog.dtos import AppendNotableWorksCommand
from composers_api.domain.catalog.entities import Composer
from composers_api.domain.catalog.failures import StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

logger = logging.getLogger(__name__)


class AppendNotableWorksUseCase:
    """Adds works to the end of a composer's notable works, keeping order."""

    def __init__(self, repository: ComposerRepository) -> None:
        """Initialize the use case.

        Args:
            repository: Store adapter for composer records.
        """
        self._repository = repository

    def execute(self, command: AppendNotableWorksCommand) -> StoreResult[Composer]:
        """Run the append use case.

        Args:
            command: Target composer and the works to append.

        Returns:
            The updated composer, or the store failure.
        """
        logger.info(
            "Appending %d notable works to composer %s",
            len(command.works),
            command.composer_id,
        )
        return self._repository.append_notable_works(
            command.composer_id, list(command.works)
        )
