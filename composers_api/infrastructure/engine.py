"""
Record store engine setup.

Builds the SQLAlchemy engine from settings and creates missing tables.
The engine is owned by whoever creates it (the app factory or a CLI
command) and passed explicitly to the repositories.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from composers_api.core.config import Settings
from composers_api.infrastructure.catalog.tables import metadata

logger = logging.getLogger(__name__)


def create_store_engine(app_settings: Settings) -> Engine:
    """Build a SQLAlchemy engine from application settings."""
    return create_engine(app_settings.get_database_url(), pool_pre_ping=True)


def ensure_tables(engine: Engine) -> bool:
    """Create the composers table if it is missing.

    Returns:
        False when the store could not be reached.
    """
    try:
        metadata.create_all(engine)
    except SQLAlchemyError:
        logger.warning(
            "Could not create tables; requests will fail until the "
            "record store is reachable.",
            exc_info=True,
        )
        return False
    return True
