"""
Infrastructure adapters for the catalog bounded context.

The SQLAlchemy composer repository implements the ComposerRepository
port and owns the ``composers`` table definition.
"""
