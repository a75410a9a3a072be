"""Notification fan-out for the daemon.

Notifications and status changes produced while reconciling are queued for
every connected SSE subscriber. Publishing never blocks and never fails the
caller: notifications are fire-and-forget.
"""

import asyncio
import logging
from typing import Any

from afwk_library.models.reconciliation import Notification
from afwk_library.models.reconciliation import StatusSummary

logger = logging.getLogger(__name__)


class EventQueueEmitter:
    """Emitter that queues events for async consumption.

    Each subscriber gets its own queue so a slow reader never blocks the
    publisher or other readers.
    """

    def __init__(self, max_queue_size: int = 100) -> None:
        self.queues: list[asyncio.Queue[dict[str, Any]]] = []
        self._max_queue_size = max_queue_size

    def subscribe(self) -> asyncio.Queue[dict[str, Any]]:
        """Create new subscriber queue.

        Returns:
            asyncio.Queue that will receive all published events
        """
        queue: asyncio.Queue[dict[str, Any]] = asyncio.Queue(maxsize=self._max_queue_size)
        self.queues.append(queue)
        return queue

    def publish(self, event_type: str, data: dict[str, Any]) -> None:
        """Publish event to all subscriber queues.

        Args:
            event_type: Event type identifier (e.g., "notification", "status")
            data: Event payload
        """
        event = {"event": event_type, "data": data}
        for queue in list(self.queues):
            try:
                queue.put_nowait(event)
            except asyncio.QueueFull:
                logger.warning(f"Dropping {event_type} event for a subscriber that is not keeping up")

    def unsubscribe(self, queue: asyncio.Queue[dict[str, Any]]) -> None:
        """Remove subscriber queue."""
        if queue in self.queues:
            self.queues.remove(queue)


class NotificationService:
    """Singleton service for daemon-wide notification events."""

    _instance: EventQueueEmitter | None = None

    @classmethod
    def get_instance(cls) -> EventQueueEmitter:
        """Get the singleton EventQueueEmitter instance."""
        if cls._instance is None:
            cls._instance = EventQueueEmitter()
        return cls._instance

    @classmethod
    def publish(cls, event_type: str, data: dict[str, Any]) -> None:
        cls.get_instance().publish(event_type, data)

    @classmethod
    def subscribe(cls) -> asyncio.Queue:
        return cls.get_instance().subscribe()

    @classmethod
    def unsubscribe(cls, queue: asyncio.Queue) -> None:
        cls.get_instance().unsubscribe(queue)


class EventNotifier:
    """Notifier that records messages and publishes them as events."""

    def __init__(self, workspace_path: str | None = None) -> None:
        self.workspace_path = workspace_path
        self.notifications: list[Notification] = []

    def info(self, message: str) -> None:
        self._publish(Notification(level="info", message=message))

    def error(self, message: str) -> None:
        self._publish(Notification(level="error", message=message))

    def _publish(self, notification: Notification) -> None:
        self.notifications.append(notification)
        data = notification.model_dump(mode="json", by_alias=True)
        data["workspacePath"] = self.workspace_path
        NotificationService.publish("notification", data)


def publish_status(summary: StatusSummary, workspace_path: str | None = None) -> None:
    """Publish a status summary to subscribers."""
    data = summary.model_dump(mode="json", by_alias=True)
    data["workspacePath"] = workspace_path
    NotificationService.publish("status", data)
