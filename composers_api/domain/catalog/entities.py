"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class SortField(Enum):
    """Composer fields the list operation may order by."""

    BORN = "born"
    NAME = "name"
    DEATH = "death"


@dataclass(frozen=True)
class SortSpec:
    """Sort key and direction for listing composers."""

    field: SortField = SortField.NAME
    descending: bool = False

    @classmethod
    def parse(cls, token: str) -> "SortSpec":
        """Build a SortSpec from a ``sortBy`` token such as ``-born``.

        A leading ``-`` selects descending order.
        """
        descending = token.startswith("-")
        return cls(field=SortField(token.lstrip("-")), descending=descending)


@dataclass(frozen=True)
class ComposerFilter:
    """Criteria for listing composers.

    Attributes:
        name: Case-insensitive substring of the composer name.
    """

    name: Optional[str] = None


@dataclass(frozen=True)
class ComposerDraft:
    """Client-settable composer fields, as submitted on create or update."""

    name: str
    born: int
    era: str
    bio: str
    death: Optional[int] = None
    notable_works: tuple[str, ...] = ()


@dataclass(frozen=True)
class Composer:
    """A stored composer record. ``id`` and timestamps belong to the store."""

    id: str
    name: str
    born: int
    era: str
    bio: str
    created_at: datetime
    updated_at: datetime
    death: Optional[int] = None
    notable_works: tuple[str, ...] = field(default_factory=tuple)
