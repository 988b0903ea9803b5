"""
Pydantic schemas for the composer API.

These schemas enforce input validation and define the API contract.
Bounds come from domain.catalog.constraints so the HTTP layer and the
store check the same rules. JSON keys are camelCase.
No business logic belongs here.
"""

from datetime import datetime
from typing import Annotated, Any, Literal, Optional
from uuid import UUID

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationInfo,
    field_validator,
)
from pydantic.alias_generators import to_camel

from composers_api.application.catalog.dtos import ListComposersQuery
from composers_api.domain.catalog.constraints import (
    APPENDED_WORK,
    BIO,
    ERA,
    FILTER_TEXT_MAX,
    NAME,
    NOTABLE_WORK,
    lifespan_violation,
    year_violation,
)
from composers_api.domain.catalog.entities import (
    Composer,
    ComposerDraft,
    ComposerFilter,
    SortSpec,
)

WorkTitle = Annotated[
    str, StringConstraints(min_length=NOTABLE_WORK.min, max_length=NOTABLE_WORK.max)
]
AppendedWorkTitle = Annotated[
    str, StringConstraints(min_length=APPENDED_WORK.min, max_length=APPENDED_WORK.max)
]
NumericString = Annotated[str, StringConstraints(pattern=r"^\d+$")]
FilterText = Annotated[str, StringConstraints(max_length=FILTER_TEXT_MAX)]
SortToken = Literal["born", "-born", "name", "-name", "death", "-death"]


class CamelModel(BaseModel):
    """Base model reading and writing camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ComposerBody(CamelModel):
    """Request body for creating or replacing a composer.

    Attributes:
        name: 2-100 characters, unique across the catalog.
        born: Year, 0 to the current year.
        death: Optional year, same range, not before ``born``.
        era: 2-100 characters, free-form.
        bio: 10-1000 characters.
        notable_works: Titles of 2-100 characters each.
    """

    name: str = Field(..., min_length=NAME.min, max_length=NAME.max)
    born: int = Field(..., strict=True)
    death: Optional[int] = Field(default=None, strict=True)
    era: str = Field(..., min_length=ERA.min, max_length=ERA.max)
    bio: str = Field(..., min_length=BIO.min, max_length=BIO.max)
    notable_works: list[WorkTitle] = Field(default_factory=list)

    @field_validator("born", "death")
    @classmethod
    def _year_in_range(cls, value: Optional[int]) -> Optional[int]:
        if value is not None:
            reason = year_violation(value)
            if reason:
                raise ValueError(reason)
        return value

    @field_validator("death")
    @classmethod
    def _death_not_before_born(
        cls, value: Optional[int], info: ValidationInfo
    ) -> Optional[int]:
        born = info.data.get("born")
        if born is not None:
            reason = lifespan_violation(born, value)
            if reason:
                raise ValueError(reason)
        return value

    def to_draft(self) -> ComposerDraft:
        return ComposerDraft(
            name=self.name,
            born=self.born,
            death=self.death,
            era=self.era,
            bio=self.bio,
            notable_works=tuple(self.notable_works),
        )


class ListComposersParams(CamelModel):
    """Query parameters for listing composers.

    ``offset``, ``limit``, ``born`` and ``death`` arrive as strings and
    must be non-negative integers. ``born``, ``death`` and ``era`` are
    checked but do not narrow the listing; only ``name`` filters.
    Unknown parameters are ignored.
    """

    offset: NumericString = "0"
    limit: NumericString = "10"
    name: Optional[FilterText] = None
    born: Optional[NumericString] = None
    death: Optional[NumericString] = None
    era: Optional[FilterText] = None
    sort_by: SortToken = "name"

    def to_query(self) -> ListComposersQuery:
        return ListComposersQuery(
            criteria=ComposerFilter(name=self.name),
            sort=SortSpec.parse(self.sort_by),
            offset=int(self.offset),
            limit=int(self.limit),
        )


class ComposerIdParams(BaseModel):
    """Path parameters addressing a single composer."""

    id: UUID

    @property
    def composer_id(self) -> str:
        return str(self.id)


class ComposerResponse(CamelModel):
    """A stored composer as returned by the API."""

    id: str
    name: str
    born: int
    death: Optional[int] = None
    era: str
    bio: str
    notable_works: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, composer: Composer) -> "ComposerResponse":
        return cls(
            id=composer.id,
            name=composer.name,
            born=composer.born,
            death=composer.death,
            era=composer.era,
            bio=composer.bio,
            notable_works=list(composer.notable_works),
            created_at=composer.created_at,
            updated_at=composer.updated_at,
        )

    def to_json(self) -> dict[str, Any]:
        """Serialize with camelCase keys; an absent death year is omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ViolationItem(BaseModel):
    field: str
    reason: str


class ErrorResponse(BaseModel):
    """Error body shared by every non-2xx composer response."""

    error: Optional[str] = None
    details: Any = None
    violations: Optional[list[ViolationItem]] = None


class SeedResponse(BaseModel):
    """Response body for the seed endpoint."""

    inserted: int
    skipped: int


class HealthResponse(BaseModel):
    """Response body for the health endpoint."""

    status: str
    version: str


COMPOSER_BODY = TypeAdapter(ComposerBody)
LIST_PARAMS = TypeAdapter(ListComposersParams)
COMPOSER_ID = TypeAdapter(ComposerIdParams)
APPENDED_WORKS = TypeAdapter(list[AppendedWorkTitle])
