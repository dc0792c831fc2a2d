"""QuantumLink Gateway — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GatewayError → flat JSON error bodies
    - CORS configured from settings (all origins by default)
    - Connection provider built on startup, stored on app.state, disposed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - create_app() factory: tests build isolated apps, uvicorn imports the module-level app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gateway.api.error_handlers import register_error_handlers
from gateway.api.routes import health, identity, quote, warranty
from gateway.config import Settings, get_settings
from gateway.infrastructure.database import ConnectionProvider
from gateway.infrastructure.observability import register_access_log, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.db = ConnectionProvider.from_url(
        settings.database_url,
        ssl_relaxed=settings.database_ssl_relaxed,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"{settings.service_name} started")
    yield
    await app.state.db.dispose()
    logger.info(f"{settings.service_name} shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(
        title=settings.service_name, version="1.0.0", lifespan=lifespan,
    )
    app.state.settings = settings

    # Salesforce / React front-ends call the gateway from the browser
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(warranty.router)
    app.include_router(identity.router)
    app.include_router(quote.router)

    register_error_handlers(app)
    register_access_log(app)
    return app


app = create_app()
