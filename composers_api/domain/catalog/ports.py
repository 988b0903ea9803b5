"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from composers_api.domain.catalog.entities import (
    Composer,
    ComposerDraft,
    ComposerFilter,
    SortSpec,
)
from composers_api.domain.catalog.failures import StoreResult


class ComposerRepository(ABC):
    """Port for reading and writing composer records.

    Every method returns a StoreResult. Expected failures (missing id,
    duplicate name, invalid data, unreachable store) are reported as a
    StoreFailure, never raised.
    """

    @abstractmethod
    def find(
        self, criteria: ComposerFilter, sort: SortSpec
    ) -> StoreResult[list[Composer]]:
        """Return every composer matching ``criteria``, ordered by ``sort``.

        No offset/limit is applied here; callers slice the result.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, composer_id: str) -> StoreResult[Composer]:
        """Return a composer by id, or a NOT_FOUND failure."""
        raise NotImplementedError

    @abstractmethod
    def create(self, draft: ComposerDraft) -> StoreResult[Composer]:
        """Insert a new composer.

        Fails with CONFLICT when the name is taken and with VALIDATION
        when the draft breaks a field constraint.
        """
        raise NotImplementedError

    @abstractmethod
    def update_by_id(
        self, composer_id: str, draft: ComposerDraft
    ) -> StoreResult[Composer]:
        """Replace the client-settable fields and return the updated record."""
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, composer_id: str) -> StoreResult[Composer]:
        """Remove a composer and return the record as it was before removal."""
        raise NotImplementedError

    @abstractmethod
    def append_notable_works(
        self, composer_id: str, works: list[str]
    ) -> StoreResult[Composer]:
        """Append ``works`` to the end of the composer's notable works."""
        raise NotImplementedError
