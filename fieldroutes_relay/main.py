"""FieldRoutes Relay API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Search routes registered before record routes (/search is not an id)
    - Global error handlers map RelayError -> flat JSON envelope
    - Rate limiting applied to every route before handlers run
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app(settings) factory: tests build apps with their own Settings
      and a fresh rate-limit store
    - Lifespan over @app.on_event: logging configured once at startup
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from fieldroutes_relay.api.error_handlers import register_error_handlers
from fieldroutes_relay.api.routes import (
    credentials,
    customer_records,
    customer_search,
    health,
)
from fieldroutes_relay.config import Settings, get_settings
from fieldroutes_relay.infrastructure.observability import setup_logging
from fieldroutes_relay.infrastructure.rate_limiter import build_limiter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"FieldRoutes relay running on port {settings.port}")
    logger.info(f"Environment: {settings.app_env}")
    yield
    logger.info("FieldRoutes relay shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title="FieldRoutes Relay",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if settings.is_production else "/openapi.json",
    )
    app.state.settings = settings

    register_error_handlers(app)

    app.state.limiter = build_limiter(settings)
    app.add_middleware(SlowAPIMiddleware)

    # Added last: outermost middleware, wraps rate-limited responses too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(customer_search.router)
    app.include_router(customer_records.router)
    app.include_router(credentials.router)

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "fieldroutes_relay.main:app",
        host=settings.host,
        port=settings.port,
    )
