"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Interface uvicorn binds to.
        port: Port uvicorn listens on.
        api_prefix: Path prefix for every API route.
        database_url: Full SQLAlchemy URL. Overrides the postgres_* parts.
        create_tables: Create the composers table at startup if missing.
        rate_limit_enabled: Toggle process-wide rate limiting.
        rate_limit_default: Default per-client rate limit for all endpoints.
        static_dir: Directory of static assets served at the site root.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Composer Catalog"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "::"
    port: int = 3000
    api_prefix: str = "/api"

    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "workshop_composers"
    create_tables: bool = True

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"

    static_dir: Optional[str] = None

    def get_database_url(self) -> str:
        """Return the effective SQLAlchemy URL for the record store.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a psycopg DSN from postgres_* values
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
