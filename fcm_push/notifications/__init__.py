"""Failure report sinks."""

from fcm_push.notifications.base import Notifier
from fcm_push.notifications.log import LoggingNotifier

__all__ = ["LoggingNotifier", "Notifier"]
