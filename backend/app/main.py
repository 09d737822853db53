"""Clients API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every response, success or error, is a {meta, data} envelope carrying x-request-id
    - Database manager created on startup and disposed on shutdown via lifespan,
      stored on app.state (never a module global)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Middleware order: UnhandledErrorMiddleware added first (inner), RequestIdMiddleware
      last (outer) — add_middleware wraps, so the last one added runs first
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from app.api.error_handlers import register_error_handlers
from app.api.middleware import RequestIdMiddleware, UnhandledErrorMiddleware
from app.api.routes import clients, health
from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(
        settings.log_level, settings.log_format, sql_echo=settings.database_echo,
    )
    app.state.db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info(f"Clients API started ({settings.environment})")
    yield
    await app.state.db_manager.dispose()
    logger.info("Clients API shutting down")


app = FastAPI(title="Clients API", version="1.0.0", lifespan=lifespan)

app.add_middleware(UnhandledErrorMiddleware)
app.add_middleware(RequestIdMiddleware)

app.include_router(health.router)
app.include_router(clients.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    logger.info(f"Listening on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
