"""
Shared fixtures.

Every test gets a fresh in-memory SQLite store so no external
services are needed. Rate limiting is off unless a test turns it on.
"""

from typing import Any, Callable

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from composers_api.core.config import Settings
from composers_api.infrastructure.catalog.composer_repository import (
    SqlComposerRepository,
)
from composers_api.infrastructure.catalog.tables import metadata
from composers_api.main import create_app

SQLITE_URL = "sqlite+pysqlite:///:memory:"


def _sqlite_engine() -> Engine:
    return create_engine(
        SQLITE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


@pytest.fixture()
def engine():
    eng = _sqlite_engine()
    metadata.create_all(eng)
    yield eng
    eng.dispose()


@pytest.fixture()
def bare_engine():
    """An engine whose database has no tables; every query fails."""
    eng = _sqlite_engine()
    yield eng
    eng.dispose()


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(
        database_url=SQLITE_URL,
        create_tables=False,
        rate_limit_enabled=False,
        log_level="WARNING",
    )


@pytest.fixture()
def client(engine, test_settings) -> TestClient:
    return TestClient(create_app(test_settings, engine=engine))


@pytest.fixture()
def repository(engine) -> SqlComposerRepository:
    return SqlComposerRepository(engine=engine)


@pytest.fixture()
def composer_payload() -> Callable[..., dict[str, Any]]:
    """Factory for a valid composer request body; keyword args override fields."""

    def build(**overrides: Any) -> dict[str, Any]:
        payload = {
            "name": "J.S. Bach",
            "born": 1685,
            "death": 1750,
            "era": "Baroque",
            "bio": "German composer of the late Baroque period.",
            "notableWorks": ["Mass in B minor"],
        }
        payload.update(overrides)
        return payload

    return build
