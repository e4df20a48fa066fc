"""
Card Gateway - Main Application Entry Point

A thin HTTP gateway exposing create, read, update and delete
operations over a single configurable card table.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from card_gateway import __version__
from card_gateway.core.config import Settings, settings as default_settings
from card_gateway.core.logging import setup_logging
from card_gateway.core.metrics import get_metrics, get_metrics_content_type
from card_gateway.infrastructure.database import (
    DEFAULT_CARDS_TABLE,
    DatabaseSessionManager,
    build_cards_table,
    resolve_identifier,
)
from card_gateway.presentation.api import api_router
from card_gateway.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


def resolve_cards_table(settings: Settings):
    """
    Build the card table definition from configuration.

    Raises:
        UnsafeIdentifierError: If a configured name is unsafe and
            ``strict_identifiers`` is enabled
    """
    table_name = resolve_identifier(
        "CARDS_TABLE",
        settings.cards_table,
        DEFAULT_CARDS_TABLE,
        strict=settings.strict_identifiers,
    )
    schema = resolve_identifier(
        "DB_NAME",
        settings.db_name,
        None,
        strict=settings.strict_identifiers,
    )
    return build_cards_table(table_name, schema)


def create_app(settings: Settings = default_settings) -> FastAPI:
    """Assemble the FastAPI application for the given settings."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """
        Application lifespan manager.

        Handles startup and shutdown events:
        - Set up logging
        - Resolve the card table name
        - Create the database connection pool
        - Drain the pool on shutdown
        """
        setup_logging(settings.log_level, settings.log_format)
        logger = structlog.get_logger(__name__)

        app.state.cards_table = resolve_cards_table(settings)
        app.state.db = DatabaseSessionManager.from_settings(settings)

        logger.info(
            "application_started",
            version=__version__,
            cards_table=app.state.cards_table.fullname,
        )

        yield

        await app.state.db.close()
        logger.info("application_stopped")

    app = FastAPI(
        title="Card Gateway",
        description="HTTP gateway for the card table",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        redirect_slashes=False,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    error_handler_middleware(app)

    app.include_router(api_router)

    if settings.metrics_enabled:
        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            """Prometheus metrics endpoint."""
            return Response(
                content=get_metrics(),
                media_type=get_metrics_content_type(),
            )

    return app


app = create_app()
