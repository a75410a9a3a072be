"""Daemon services."""

from .notifications import EventNotifier
from .notifications import EventQueueEmitter
from .notifications import NotificationService
from .notifications import publish_status

__all__ = [
    "EventNotifier",
    "EventQueueEmitter",
    "NotificationService",
    "publish_status",
]
