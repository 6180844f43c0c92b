"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from classdoc import __version__
from classdoc.api.routes import extract_router, health_router
from classdoc.config import get_settings
from classdoc.logging import configure_logging, get_logger

logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Configure logging first
    configure_logging()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler for startup/shutdown."""
        logger.info("application_starting", version=__version__)
        yield
        logger.info("application_stopped")

    app = FastAPI(
        title="Class Documentation API",
        description="Extracts JSDoc documentation models from JavaScript class sources",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router)
    app.include_router(extract_router, prefix="/api/v1")

    logger.info(
        "application_configured",
        debug=settings.debug,
        recovery_enabled=settings.enable_recovery,
        max_source_bytes=settings.max_source_bytes,
    )

    return app
