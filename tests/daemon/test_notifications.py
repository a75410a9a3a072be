"""
Unit tests for the notification fan-out.
"""

import pytest

from afwk_library.models.reconciliation import ReconciliationState
from afwk_library.reconciliation.status import build_status_summary
from afwkd.services.notifications import EventNotifier
from afwkd.services.notifications import EventQueueEmitter
from afwkd.services.notifications import NotificationService
from afwkd.services.notifications import publish_status


@pytest.mark.unit
class TestEventQueueEmitter:
    """Test per-subscriber queues."""

    @pytest.mark.asyncio
    async def test_every_subscriber_receives(self) -> None:
        """Test events reach every subscriber."""
        emitter = EventQueueEmitter()
        first = emitter.subscribe()
        second = emitter.subscribe()

        emitter.publish("notification", {"message": "hi"})

        assert (await first.get()) == {"event": "notification", "data": {"message": "hi"}}
        assert (await second.get())["data"] == {"message": "hi"}

    @pytest.mark.asyncio
    async def test_unsubscribe(self) -> None:
        """Test unsubscribed queues receive nothing."""
        emitter = EventQueueEmitter()
        queue = emitter.subscribe()
        emitter.unsubscribe(queue)

        emitter.publish("notification", {})

        assert queue.empty()

    @pytest.mark.asyncio
    async def test_full_queue_drops(self) -> None:
        """Test a full subscriber queue drops events instead of blocking."""
        emitter = EventQueueEmitter(max_queue_size=1)
        queue = emitter.subscribe()

        emitter.publish("a", {})
        emitter.publish("b", {})

        assert queue.qsize() == 1
        assert (await queue.get())["event"] == "a"


@pytest.mark.unit
class TestEventNotifier:
    """Test notifier publishing."""

    @pytest.mark.asyncio
    async def test_records_and_publishes(self, fresh_notifications) -> None:
        """Test notifications are kept and published with the workspace."""
        queue = NotificationService.subscribe()
        notifier = EventNotifier("/ws")

        notifier.info("created")
        notifier.error("failed")

        assert [n.level for n in notifier.notifications] == ["info", "error"]
        event = await queue.get()
        assert event == {"event": "notification", "data": {"level": "info", "message": "created", "workspacePath": "/ws"}}
        assert (await queue.get())["data"]["level"] == "error"

    @pytest.mark.asyncio
    async def test_publish_status(self, fresh_notifications) -> None:
        """Test status summaries are published in camelCase."""
        queue = NotificationService.subscribe()

        publish_status(build_status_summary(ReconciliationState.DISABLED, "none"), workspace_path="/ws")

        event = await queue.get()
        assert event["event"] == "status"
        assert event["data"]["state"] == "disabled"
        assert event["data"]["text"] == "AFWK: Disabled"
        assert event["data"]["workspacePath"] == "/ws"
