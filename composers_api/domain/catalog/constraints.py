"""
Field constraints for composer records.

This is the single definition of what a valid composer looks like.
The HTTP input schemas and the store adapter both consult it, so the
two layers cannot drift apart.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from composers_api.domain.catalog.entities import ComposerDraft
from composers_api.domain.catalog.failures import FieldViolation


@dataclass(frozen=True)
class LengthBounds:
    """Inclusive character-length bounds for a text field."""

    min: int
    max: int

    def violation(self, value: str) -> Optional[str]:
        if len(value) < self.min:
            return f"must be at least {self.min} characters"
        if len(value) > self.max:
            return f"must be at most {self.max} characters"
        return None


NAME = LengthBounds(2, 100)
ERA = LengthBounds(2, 100)
BIO = LengthBounds(10, 1000)
NOTABLE_WORK = LengthBounds(2, 100)
# Items added through the append endpoint may be a single character.
APPENDED_WORK = LengthBounds(1, 100)
FILTER_TEXT_MAX = 100

EARLIEST_YEAR = 0


def current_year() -> int:
    """Return the calendar year used as the upper bound for years."""
    return date.today().year


def year_violation(value: int) -> Optional[str]:
    """Return why ``value`` is not an acceptable year, or None."""
    if value < EARLIEST_YEAR:
        return f"must be greater than or equal to {EARLIEST_YEAR}"
    latest = current_year()
    if value > latest:
        return f"must be less than or equal to {latest}"
    return None


def lifespan_violation(born: int, death: Optional[int]) -> Optional[str]:
    """Return why the death year conflicts with the birth year, or None."""
    if death is not None and death < born:
        return "death year cannot precede born year"
    return None


def works_violations(
    works: Iterable[str], bounds: LengthBounds = NOTABLE_WORK
) -> list[FieldViolation]:
    """Check every notable work against ``bounds``."""
    violations = []
    for index, work in enumerate(works):
        reason = bounds.violation(work)
        if reason:
            violations.append(FieldViolation(f"notableWorks.{index}", reason))
    return violations


def check_composer(draft: ComposerDraft) -> list[FieldViolation]:
    """Validate a composer draft against every constraint.

    Args:
        draft: The client-settable fields to check.

    Returns:
        All violations found; an empty list means the draft is valid.
    """
    violations: list[FieldViolation] = []

    for name, bounds, value in (
        ("name", NAME, draft.name),
        ("era", ERA, draft.era),
        ("bio", BIO, draft.bio),
    ):
        reason = bounds.violation(value)
        if reason:
            violations.append(FieldViolation(name, reason))

    reason = year_violation(draft.born)
    if reason:
        violations.append(FieldViolation("born", reason))

    if draft.death is not None:
        reason = year_violation(draft.death)
        if reason:
            violations.append(FieldViolation("death", reason))

    reason = lifespan_violation(draft.born, draft.death)
    if reason:
        violations.append(FieldViolation("death", reason))

    violations.extend(works_violations(draft.notable_works))
    return violations
