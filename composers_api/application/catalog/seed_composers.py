"""
Use case: Seed the catalog with sample composers.

Input: list of ComposerDraft
Output: StoreResult[SeedReport]
Side effects: Inserts every sample whose name is not taken yet.
Failure cases: VALIDATION or STORE on any sample aborts the run;
already-inserted samples stay.
"""

import logging

from composers_api.application.catalog.dtos import SeedReport
from composers_api.domain.catalog.entities import ComposerDraft
from composers_api.domain.catalog.failures import FailureKind, StoreResult
from composers_api.domain.catalog.ports import ComposerRepository

logger = logging.getLogger(__name__)


class SeedComposersUseCase:
    """Loads sample composers, skipping names that already exist."""

    def __init__(
        self, repository: ComposerRepository, drafts: list[ComposerDraft]
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Store adapter for composer records.
            drafts: Sample composers to insert, in order.
        """
        self._repository = repository
        self._drafts = drafts

    def execute(self) -> StoreResult[SeedReport]:
        inserted = skipped = 0
        for draft in self._drafts:
            result = self._repository.create(draft)
            if result.ok:
                inserted += 1
            elif result.failure.kind is FailureKind.CONFLICT:
                skipped += 1
            else:
                logger.error(
                    "Seeding stopped at %s: %s", draft.name, result.failure.message
                )
                return StoreResult(failure=result.failure)

        logger.info("Seeded composers: inserted=%d, skipped=%d", inserted, skipped)
        return StoreResult.success(SeedReport(inserted=inserted, skipped=skipped))
