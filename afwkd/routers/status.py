"""Status router for afwkd API.

Provides health check and status information.
"""

import logging
import time
from typing import Annotated

from fastapi import APIRouter
from fastapi import Depends

from afwk_library.config.settings import AfwkSettings

from .. import __version__
from ..dependencies import get_settings
from ..models import StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["status"])

# Track daemon start time for uptime calculation
_start_time = time.time()


@router.get("/status", response_model=StatusResponse)
async def get_status(
    settings: Annotated[AfwkSettings, Depends(get_settings)],
) -> StatusResponse:
    """Get daemon status.

    Returns:
        Daemon status information including version, uptime, and default workspace
    """
    uptime = time.time() - _start_time

    return StatusResponse(
        status="running",
        version=__version__,
        uptime_seconds=uptime,
        workspace_path=settings.workspace_path,
        schema_path=settings.schema_path,
    )


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Simple health status
    """
    return {"status": "healthy"}
