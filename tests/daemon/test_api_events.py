"""
Integration tests for the SSE event stream.

Drives the stream's generator directly: a streaming response never ends on
its own, so reading it through the HTTP client would block.
"""

import json

import pytest

from afwkd.main import app
from afwkd.routers.events import stream_events
from afwkd.services.notifications import EventNotifier
from afwkd.services.notifications import NotificationService


@pytest.mark.integration
class TestEventStream:
    """Test GET /api/v1/events."""

    def test_route_registered(self) -> None:
        """Test the SSE endpoint is mounted at its path."""
        assert app.url_path_for("stream_events") == "/api/v1/events"

    @pytest.mark.asyncio
    async def test_first_event_is_connected(self, fresh_notifications) -> None:
        """Test a new stream starts with a connected event and subscribes."""
        response = await stream_events()
        events = response.body_iterator

        first = await events.__anext__()

        assert first.event == "connected"
        assert "timestamp" in json.loads(first.data)
        assert len(NotificationService.get_instance().queues) == 1

        await events.aclose()
        assert NotificationService.get_instance().queues == []

    @pytest.mark.asyncio
    async def test_notifications_are_streamed(self, fresh_notifications) -> None:
        """Test a published notification is forwarded to the stream."""
        response = await stream_events()
        events = response.body_iterator
        await events.__anext__()

        EventNotifier("/ws").info("AFWK structure created (11 items)")
        event = await events.__anext__()

        assert event.event == "notification"
        assert json.loads(event.data) == {
            "level": "info",
            "message": "AFWK structure created (11 items)",
            "workspacePath": "/ws",
        }

        await events.aclose()
