"""Notification dispatch across platforms."""

from .sounds import Sound, describe
from .base import NotificationRequest, NotificationResult, Notifier, NotifierError
from .dispatcher import Dispatcher, create_dispatcher, get_notifier

__all__ = [
    "Sound",
    "describe",
    "NotificationRequest",
    "NotificationResult",
    "Notifier",
    "NotifierError",
    "Dispatcher",
    "create_dispatcher",
    "get_notifier",
]
