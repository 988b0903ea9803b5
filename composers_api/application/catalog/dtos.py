"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field

from composers_api.domain.catalog.entities import (
    ComposerDraft,
    ComposerFilter,
    SortSpec,
)


@dataclass(frozen=True)
class ListComposersQuery:
    """Input DTO for listing composers.

    Attributes:
        criteria: Filters applied by the store.
        sort: Sort key and direction applied by the store.
        offset: Number of matching composers to skip.
        limit: Maximum number of composers to return after the offset.
    """

    criteria: ComposerFilter = field(default_factory=ComposerFilter)
    sort: SortSpec = field(default_factory=SortSpec)
    offset: int = 0
    limit: int = 10


@dataclass(frozen=True)
class UpdateComposerCommand:
    """Input DTO for replacing a composer's fields."""

    composer_id: str
    draft: ComposerDraft


@dataclass(frozen=True)
class AppendNotableWorksCommand:
    """Input DTO for appending notable works to a composer.

    Attributes:
        composer_id: Target composer.
        works: Titles to add, in order, after the existing ones.
    """

    composer_id: str
    works: tuple[str, ...]


@dataclass(frozen=True)
class SeedReport:
    """Output DTO for the seed operation.

    Attributes:
        inserted: Sample composers written to the store.
        skipped: Sample composers whose name was already taken.
    """

    inserted: int
    skipped: int
