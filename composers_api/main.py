"""
Application entry point.

Creates the FastAPI application and wires together:
- Record store engine (one per application, kept on app.state)
- Routers (health, composers, seed)
- Error handlers (centralized failure-to-HTTP mapping)
- Middleware (rate limiting, request context)
- Logging configuration
- Optional static asset directory

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.engine import Engine

from composers_api.core.config import Settings, settings
from composers_api.infrastructure.engine import create_store_engine, ensure_tables
from composers_api.interfaces.catalog.router import router as composers_router
from composers_api.interfaces.catalog.router import seed_router
from composers_api.interfaces.health import router as health_router
from composers_api.shared.errors.handlers import register_error_handlers
from composers_api.shared.logging import configure_logging
from composers_api.shared.middleware.request_context import RequestContextMiddleware
from composers_api.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        app_settings: Settings to use. Defaults to the environment.
        engine: Store engine to use. Defaults to one built from settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(level=app_settings.log_level)
    store_engine = engine or create_store_engine(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Prepare the record store on startup and release it on shutdown."""
        if app_settings.create_tables:
            ensure_tables(store_engine)
        yield
        store_engine.dispose()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.engine = store_engine

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(app_settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Request Context (outermost, so 429s are logged too) ---
    app.add_middleware(RequestContextMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=app_settings.api_prefix)
    app.include_router(composers_router, prefix=app_settings.api_prefix)
    app.include_router(seed_router, prefix=app_settings.api_prefix)

    # --- Static assets (mounted last so API routes match first) ---
    if app_settings.static_dir:
        static_dir = Path(app_settings.static_dir)
        if static_dir.is_dir():
            app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
        else:
            logger.warning("Static directory %s not found; not serving assets.", static_dir)

    return app


app = create_app()
