"""
Adapter: Composer repository.

Implements the ComposerRepository port on top of a SQLAlchemy engine.
Each operation runs in its own transaction. Integrity errors become
CONFLICT failures. Every other SQLAlchemy error, and any driver error
raised while converting parameters, becomes a STORE failure. Nothing is
raised to the caller.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, TypeVar
from uuid import uuid4

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Connection, Engine, Row
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.sql.elements import ColumnElement

from composers_api.domain.catalog.constraints import (
    APPENDED_WORK,
    check_composer,
    works_violations,
)
from composers_api.domain.catalog.entities import (
    Composer,
    ComposerDraft,
    ComposerFilter,
    SortField,
    SortSpec,
)
from composers_api.domain.catalog.failures import (
    FailureKind,
    FieldViolation,
    StoreResult,
)
from composers_api.domain.catalog.ports import ComposerRepository
from composers_api.infrastructure.catalog.tables import composers

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _draft_values(draft: ComposerDraft) -> dict[str, Any]:
    return {
        "name": draft.name,
        "born": draft.born,
        "death": draft.death,
        "era": draft.era,
        "bio": draft.bio,
        "notable_works": list(draft.notable_works),
    }


def _to_composer(row: Row) -> Composer:
    return Composer(
        id=row.id,
        name=row.name,
        born=row.born,
        death=row.death,
        era=row.era,
        bio=row.bio,
        notable_works=tuple(row.notable_works or ()),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def name_sort_column(dialect_name: str) -> ColumnElement:
    """Return the name column to order by for the given SQL dialect.

    PostgreSQL orders by the database locale unless told otherwise, so the
    "C" collation is forced there. SQLite compares bytes by default.
    """
    if dialect_name == "postgresql":
        return composers.c.name.collate("C")
    return composers.c.name


def _invalid(violations: list[FieldViolation]) -> StoreResult:
    return StoreResult.fail(
        FailureKind.VALIDATION,
        "Composer failed store validation",
        violations=tuple(violations),
    )


class SqlComposerRepository(ComposerRepository):
    """Stores composers in the ``composers`` table.

    Implements the ComposerRepository port defined in the domain layer.
    Runs against PostgreSQL in production and SQLite in tests.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def find(
        self, criteria: ComposerFilter, sort: SortSpec
    ) -> StoreResult[list[Composer]]:
        """Return matching composers ordered by ``sort``.

        Nulls sort first ascending and last descending on every backend.
        Names compare byte-wise, whatever the database locale.
        """
        stmt = select(composers)
        if criteria.name:
            # SQLite lower() folds ASCII only; PostgreSQL folds all of Unicode.
            stmt = stmt.where(
                func.lower(composers.c.name).contains(
                    criteria.name.lower(), autoescape=True
                )
            )

        name = name_sort_column(self._engine.dialect.name)
        if sort.field is SortField.NAME:
            column = name
        else:
            column = composers.c[sort.field.value]
        if sort.descending:
            order = column.desc().nulls_last()
        else:
            order = column.asc().nulls_first()
        stmt = stmt.order_by(order, name)

        def work(conn: Connection) -> StoreResult[list[Composer]]:
            rows = conn.execute(stmt).fetchall()
            return StoreResult.success([_to_composer(row) for row in rows])

        return self._run("find", work)

    def get_by_id(self, composer_id: str) -> StoreResult[Composer]:
        def work(conn: Connection) -> StoreResult[Composer]:
            composer = self._fetch(conn, composer_id)
            if composer is None:
                return StoreResult.not_found(composer_id)
            return StoreResult.success(composer)

        return self._run("get_by_id", work)

    def create(self, draft: ComposerDraft) -> StoreResult[Composer]:
        violations = check_composer(draft)
        if violations:
            return _invalid(violations)

        composer_id = str(uuid4())
        now = _now()

        def work(conn: Connection) -> StoreResult[Composer]:
            conn.execute(
                insert(composers).values(
                    id=composer_id,
                    created_at=now,
                    updated_at=now,
                    **_draft_values(draft),
                )
            )
            return StoreResult.success(self._fetch(conn, composer_id))

        result = self._run("create", work, name=draft.name)
        if result.ok:
            logger.info("Created composer %s (%s)", composer_id, draft.name)
        return result

    def update_by_id(
        self, composer_id: str, draft: ComposerDraft
    ) -> StoreResult[Composer]:
        violations = check_composer(draft)
        if violations:
            return _invalid(violations)

        def work(conn: Connection) -> StoreResult[Composer]:
            result = conn.execute(
                update(composers)
                .where(composers.c.id == composer_id)
                .values(updated_at=_now(), **_draft_values(draft))
            )
            if result.rowcount == 0:
                return StoreResult.not_found(composer_id)
            return StoreResult.success(self._fetch(conn, composer_id))

        return self._run("update_by_id", work, name=draft.name)

    def delete_by_id(self, composer_id: str) -> StoreResult[Composer]:
        def work(conn: Connection) -> StoreResult[Composer]:
            existing = self._fetch(conn, composer_id)
            if existing is None:
                return StoreResult.not_found(composer_id)
            conn.execute(delete(composers).where(composers.c.id == composer_id))
            return StoreResult.success(existing)

        return self._run("delete_by_id", work)

    def append_notable_works(
        self, composer_id: str, works: list[str]
    ) -> StoreResult[Composer]:
        """Append works inside one transaction holding a row lock.

        The lock is taken with SELECT ... FOR UPDATE, so concurrent appends
        to the same composer are serialized on backends that support it.
        """
        violations = works_violations(works, APPENDED_WORK)
        if violations:
            return _invalid(violations)

        def work(conn: Connection) -> StoreResult[Composer]:
            row = conn.execute(
                select(composers.c.notable_works)
                .where(composers.c.id == composer_id)
                .with_for_update()
            ).first()
            if row is None:
                return StoreResult.not_found(composer_id)
            conn.execute(
                update(composers)
                .where(composers.c.id == composer_id)
                .values(
                    notable_works=[*(row.notable_works or ()), *works],
                    updated_at=_now(),
                )
            )
            return StoreResult.success(self._fetch(conn, composer_id))

        return self._run("append_notable_works", work)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fetch(self, conn: Connection, composer_id: str) -> Optional[Composer]:
        row = conn.execute(
            select(composers).where(composers.c.id == composer_id)
        ).first()
        return _to_composer(row) if row is not None else None

    def _run(
        self,
        operation: str,
        work: Callable[[Connection], StoreResult[T]],
        name: Optional[str] = None,
    ) -> StoreResult[T]:
        """Run ``work`` in a transaction and classify store errors."""
        try:
            with self._engine.begin() as conn:
                return work(conn)
        except IntegrityError:
            logger.warning("Duplicate composer name on %s: %s", operation, name)
            return StoreResult.fail(
                FailureKind.CONFLICT,
                "Composer already exists",
                {"keyPattern": {"name": 1}, "keyValue": {"name": name}},
            )
        except SQLAlchemyError as exc:
            logger.error(
                "Record store error on %s: %s", operation, type(exc).__name__
            )
            return StoreResult.fail(
                FailureKind.STORE,
                f"Record store error during {operation}",
                {"code": exc.code or type(exc).__name__},
            )
        except (OverflowError, TypeError, ValueError) as exc:
            # Raised by the driver while converting parameters.
            logger.error(
                "Driver rejected parameters on %s: %s", operation, type(exc).__name__
            )
            return StoreResult.fail(
                FailureKind.STORE,
                f"Record store error during {operation}",
                {"code": type(exc).__name__},
            )
