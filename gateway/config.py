"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - DATABASE_URL is required; startup fails without it
    - get_settings() is cached (lru_cache) — single instance per process
    - Handlers read settings through get_app_settings(), the instance given to create_app()
    - database_url always targets the asyncpg driver for PostgreSQL URLs

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - libpq-only options (sslmode, channel_binding) stripped from the URL:
      asyncpg rejects them, TLS is governed by database_ssl_relaxed instead
"""

from functools import lru_cache

from fastapi import Request
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

_LIBPQ_ONLY_OPTIONS = ("sslmode", "channel_binding")


def normalize_database_url(url: str) -> str:
    """Point postgres URLs at asyncpg and drop options asyncpg cannot take."""
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if not url.startswith("postgresql+asyncpg://"):
        return url
    parsed = make_url(url)
    if any(key in parsed.query for key in _LIBPQ_ONLY_OPTIONS):
        parsed = parsed.difference_update_query(_LIBPQ_ONLY_OPTIONS)
        url = parsed.render_as_string(hide_password=False)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        if isinstance(v, str):
            return normalize_database_url(v.strip())
        return v

    # Managed cloud Postgres ships self-signed / intermediate chains
    database_ssl_relaxed: bool = True
    database_pool_size: int = 10
    database_max_overflow: int = 5

    # API
    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]
    service_name: str = "QuantumLink API"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """FastAPI dependency for the settings the running app was built with."""
    return request.app.state.settings
