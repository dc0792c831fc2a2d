"""Connection Provider — pooled async datastore access scoped to one query at a time.

Invariants:
    - Callers never hold a connection: fetch_all() checks one out and returns it
    - Every parameter is bound by the driver, never interpolated into SQL text
    - All driver, pool and network exceptions mapped to DatabaseError (core/errors.py)
    - No retries: one failed query is one DatabaseError
    - No logging here: the cause is chained and logged once, by core/lookup.resolve()

Design Decisions:
    - Provider lives on app.state (set by the lifespan), reached through the get_db
      dependency: tests swap the backend with dependency_overrides, no module globals
    - Relaxed TLS keeps encryption but skips certificate and hostname checks, the
      managed cloud Postgres chains are not in the system trust store
    - pool_pre_ping for stale connection detection after idle periods
"""

import ssl
from typing import Any, Mapping

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from gateway.core.errors import DatabaseError
from gateway.core.lookup import Row


def relaxed_ssl_context() -> ssl.SSLContext:
    """TLS context that encrypts without verifying the server certificate."""
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def build_connect_args(database_url: str, ssl_relaxed: bool) -> dict[str, Any]:
    """Driver connect arguments; only asyncpg URLs take an SSL context."""
    if not ssl_relaxed:
        return {}
    if make_url(database_url).drivername != "postgresql+asyncpg":
        return {}
    return {"ssl": relaxed_ssl_context()}


class ConnectionProvider:
    """Runs parameterized queries over a shared async connection pool."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    @classmethod
    def from_url(
        cls,
        database_url: str,
        ssl_relaxed: bool = True,
        pool_size: int = 10,
        max_overflow: int = 5,
    ) -> "ConnectionProvider":
        engine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_pre_ping=True,
            pool_recycle=3600,
            connect_args=build_connect_args(database_url, ssl_relaxed),
        )
        return cls(engine)

    async def fetch_all(
        self, sql: str, params: Mapping[str, Any] | None = None,
    ) -> list[Row]:
        """Execute one query on a pooled connection and return its rows as dicts."""
        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text(sql), dict(params or {}))
                return [dict(row) for row in result.mappings().all()]
        except OperationalError as e:
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            raise DatabaseError("Database operation failed", "unknown") from e
        except OSError as e:
            # Refused connections and TLS failures arrive unwrapped from asyncpg
            raise DatabaseError("Network error", "connect") from e

    async def dispose(self) -> None:
        await self.engine.dispose()


def get_db(request: Request) -> ConnectionProvider:
    """FastAPI dependency for the shared connection provider."""
    provider = getattr(request.app.state, "db", None)
    if provider is None:
        raise RuntimeError("Database not initialized")
    return provider
