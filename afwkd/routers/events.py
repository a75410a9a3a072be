"""SSE stream endpoint for AFWK notifications.

Provides a long-lived SSE connection receiving notification and status
events from every workspace the daemon operates on.
"""

import asyncio
import json
import logging
from datetime import UTC
from datetime import datetime

from fastapi import APIRouter
from sse_starlette.event import ServerSentEvent
from sse_starlette.sse import EventSourceResponse

from ..services.notifications import NotificationService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["events"])

KEEPALIVE_SECONDS = 30.0


@router.get("/events")
async def stream_events() -> EventSourceResponse:
    """Persistent SSE stream of AFWK events.

    Events:
        - connected: Initial connection established
        - notification: Info or error message ({level, message, workspacePath})
        - status: Status summary after a state change
        - keepalive: Periodic heartbeat
        - error: Stream error occurred
    """

    async def event_generator():
        """Generate SSE events from the notification service."""
        queue = NotificationService.subscribe()

        try:
            yield ServerSentEvent(
                data=json.dumps({"timestamp": datetime.now(UTC).isoformat()}),
                event="connected",
            )
            logger.info("SSE event stream connected")

            while True:
                try:
                    event = await asyncio.wait_for(queue.get(), timeout=KEEPALIVE_SECONDS)
                    yield ServerSentEvent(
                        data=json.dumps(event["data"]),
                        event=event["event"],
                    )
                except TimeoutError:
                    yield ServerSentEvent(
                        data=json.dumps({"timestamp": datetime.now(UTC).isoformat()}),
                        event="keepalive",
                    )

        except asyncio.CancelledError:
            logger.info("SSE event stream disconnected")

        except Exception as e:
            logger.error(f"SSE event stream error: {e}")
            yield ServerSentEvent(
                data=json.dumps({"error": str(e), "timestamp": datetime.now(UTC).isoformat()}),
                event="error",
            )

        finally:
            NotificationService.unsubscribe(queue)

    return EventSourceResponse(event_generator())
