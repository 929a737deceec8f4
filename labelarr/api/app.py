"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from labelarr.api.routes import health, labels
from labelarr.config import VERSION
from labelarr.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    setup_logging()
    logger.info(f"Starting Labelarr {VERSION}")

    yield

    logger.info("Labelarr stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Labelarr API",
        description="Dynamic column label rendering",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["Health"])
    app.include_router(labels.router, prefix="/api/v1", tags=["Labels"])

    return app


app = create_app()
