"""
Failure values for the catalog bounded context.

Store operations never raise for expected outcomes. They return a
StoreResult holding either a value or a StoreFailure whose kind is one
of a closed set. The interface layer maps each kind to an HTTP response.
No framework imports allowed.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(Enum):
    """Closed classification of store-layer failures."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    STORE = "store"


@dataclass(frozen=True)
class FieldViolation:
    """A single field that broke a declared constraint."""

    field: str
    reason: str


@dataclass(frozen=True)
class StoreFailure:
    """A classified failure returned by the store adapter.

    Attributes:
        kind: Which row of the error table this failure belongs to.
        message: Short human-readable summary.
        details: Store-provided detail safe to show to clients
            (conflicting key, error code). Never a stack trace.
        violations: Field violations, only for VALIDATION failures.
    """

    kind: FailureKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)
    violations: tuple[FieldViolation, ...] = ()


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Outcome of a store operation: exactly one of value or failure."""

    value: Optional[T] = None
    failure: Optional[StoreFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        kind: FailureKind,
        message: str,
        details: Optional[dict[str, Any]] = None,
        violations: tuple[FieldViolation, ...] = (),
    ) -> "StoreResult[T]":
        return cls(
            failure=StoreFailure(
                kind=kind,
                message=message,
                details=details or {},
                violations=violations,
            )
        )

    @classmethod
    def not_found(cls, composer_id: str) -> "StoreResult[T]":
        return cls.fail(
            FailureKind.NOT_FOUND,
            f"Composer not found: {composer_id}",
            {"id": composer_id},
        )
