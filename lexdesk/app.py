"""
LexDesk - Application Factory
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lexdesk import __version__
from lexdesk.core.config import settings
from lexdesk.core.logging import get_logger, setup_logging
from lexdesk.api.routes import documents, health, query
from lexdesk.api.middleware import error_handler_middleware, logging_middleware
from lexdesk.storage import get_document_store

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    setup_logging()
    logger.info("Starting LexDesk", env=settings.APP_ENV)

    store = get_document_store()
    logger.info(
        "Document store ready",
        documents=store.count(),
        ranking_preset=settings.RANKING_PRESET,
    )

    yield

    # Shutdown
    logger.info("Shutting down LexDesk")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title=settings.APP_NAME,
        description="Question answering over a law firm's case documents",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Request-ID"],
    )

    # Last added runs first: logging -> error_handler
    app.middleware("http")(error_handler_middleware)
    app.middleware("http")(logging_middleware)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(query.router, prefix="/api/v1", tags=["Query"])
    app.include_router(documents.router, prefix="/api/v1", tags=["Documents"])

    return app
