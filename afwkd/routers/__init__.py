"""API routers for afwkd daemon.

This module contains FastAPI routers for all API endpoints.
"""

from .events import router as events_router
from .preferences import router as preferences_router
from .reconcile import router as reconcile_router
from .status import router as status_router
from .structure import router as structure_router

__all__ = [
    "events_router",
    "preferences_router",
    "reconcile_router",
    "status_router",
    "structure_router",
]
