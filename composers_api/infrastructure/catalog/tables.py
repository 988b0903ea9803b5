"""
SQLAlchemy table definitions for the record store.

Column widths come from the shared field constraints. The unique
constraint on ``name`` is what makes duplicate names a conflict.
"""

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)

from composers_api.domain.catalog.constraints import BIO, ERA, NAME

metadata = MetaData()

composers = Table(
    "composers",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("name", String(NAME.max), nullable=False),
    Column("born", Integer, nullable=False),
    Column("death", Integer, nullable=True),
    Column("era", String(ERA.max), nullable=False),
    Column("bio", String(BIO.max), nullable=False),
    Column("notable_works", JSON, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    UniqueConstraint("name", name="uix_composers_name"),
)
