"""
Checked input validation.

Raw request input (query mapping, path mapping, JSON body) is run
through a pydantic TypeAdapter. The outcome is either the typed value
or an InputFailure naming the input and every offending field.
Nothing is raised to the caller.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from composers_api.domain.catalog.failures import FieldViolation

T = TypeVar("T")


class InputSource(Enum):
    """Which part of the request the input came from."""

    QUERY = "query parameters"
    PARAMS = "ID parameter"
    BODY = "request body"


@dataclass(frozen=True)
class InputFailure:
    """Structured rejection of request input."""

    source: InputSource
    violations: tuple[FieldViolation, ...]


def violations_from_errors(
    errors: Iterable[dict[str, Any]], skip: int = 0
) -> tuple[FieldViolation, ...]:
    """Convert pydantic error dicts into field violations.

    Args:
        errors: Output of ``ValidationError.errors()``.
        skip: Leading ``loc`` entries to drop (e.g. FastAPI's "body").
    """
    violations = []
    for error in errors:
        location = ".".join(str(part) for part in error["loc"][skip:])
        violations.append(FieldViolation(location or "input", error["msg"]))
    return tuple(violations)


def parse_input(
    adapter: TypeAdapter[T], raw: Any, source: InputSource
) -> Union[T, InputFailure]:
    """Validate ``raw`` against ``adapter``.

    Args:
        adapter: Schema for this input.
        raw: Untyped request input.
        source: Reported back in the failure so clients know what to fix.

    Returns:
        The validated value, or an InputFailure.
    """
    try:
        return adapter.validate_python(raw)
    except ValidationError as exc:
        return InputFailure(source, violations_from_errors(exc.errors()))
