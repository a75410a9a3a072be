"""Main FastAPI application for afwkd daemon.

This module creates and configures the FastAPI application that exposes
the afwk_library via REST API with an SSE notification stream.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from afwk_library.schema.defaults import get_schema_version

from . import __version__
from .dependencies import get_settings
from .routers import events_router
from .routers import preferences_router
from .routers import reconcile_router
from .routers import status_router
from .routers import structure_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Handles startup and shutdown events.

    Args:
        app: FastAPI application instance
    """
    # Startup
    settings = get_settings()
    logger.info(f"Starting afwkd daemon on {settings.host}:{settings.port}")
    logger.info(f"Default workspace: {settings.workspace_path}")
    if settings.schema_path:
        logger.info(f"Schema document: {settings.schema_path}")
    else:
        logger.info(f"Using built-in schema {get_schema_version()}")

    yield

    # Shutdown
    logger.info("Shutting down afwkd daemon")


# Create FastAPI application
app = FastAPI(
    title="afwkd",
    description="REST API daemon for AFWK structure validation and scaffolding",
    version=__version__,
    lifespan=lifespan,
)

# Include routers
app.include_router(status_router)
app.include_router(structure_router)
app.include_router(preferences_router)
app.include_router(reconcile_router)
app.include_router(events_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint.

    Returns:
        Welcome message with API information
    """
    return {
        "name": "afwkd",
        "version": __version__,
        "description": "REST API daemon for AFWK structure management",
        "docs": "/docs",
        "openapi": "/openapi.json",
    }
