"""
CLI entry point for the composer catalog.

Usage:
    # Serve the HTTP API (host/port from settings unless overridden)
    python -m composers_api serve --port 3000

    # Create the composers table
    python -m composers_api init-db

    # Load the bundled sample composers
    python -m composers_api seed
"""

import argparse
import logging
import sys
from typing import Optional

from composers_api.core.config import settings

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Starting composer catalog at http://[%s]:%d", host, port)
    uvicorn.run("composers_api.main:app", host=host, port=port, reload=False)


def cmd_init_db(_args: argparse.Namespace) -> None:
    """Create missing tables in the configured record store."""
    from composers_api.infrastructure.engine import create_store_engine, ensure_tables

    engine = create_store_engine(settings)
    try:
        if not ensure_tables(engine):
            sys.exit(1)
    finally:
        engine.dispose()
    logger.info("Tables ready.")


def cmd_seed(_args: argparse.Namespace) -> None:
    """Insert the bundled sample composers into the record store."""
    from composers_api.application.catalog.seed_composers import SeedComposersUseCase
    from composers_api.infrastructure.catalog.composer_repository import (
        SqlComposerRepository,
    )
    from composers_api.infrastructure.catalog.seed_data import load_seed_drafts
    from composers_api.infrastructure.engine import create_store_engine, ensure_tables

    engine = create_store_engine(settings)
    try:
        if not ensure_tables(engine):
            sys.exit(1)
        use_case = SeedComposersUseCase(
            repository=SqlComposerRepository(engine=engine),
            drafts=load_seed_drafts(),
        )
        result = use_case.execute()
    finally:
        engine.dispose()

    if not result.ok:
        logger.error("Seeding failed: %s", result.failure.message)
        sys.exit(1)
    logger.info(
        "Seeding complete: %d inserted, %d skipped.",
        result.value.inserted,
        result.value.skipped,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Composer Catalog CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Serve the HTTP API")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Listen port")
    serve_parser.set_defaults(func=cmd_serve)

    init_parser = subparsers.add_parser("init-db", help="Create database tables")
    init_parser.set_defaults(func=cmd_init_db)

    seed_parser = subparsers.add_parser("seed", help="Load sample composers")
    seed_parser.set_defaults(func=cmd_seed)

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    from composers_api.shared.logging import configure_logging

    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
