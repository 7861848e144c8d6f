"""Payload construction and validation."""

from fcm_push.messages.payload import (
    DEFAULT_PRIORITY,
    NotificationParameters,
    build_message,
    compose_message,
)
from fcm_push.messages.validation import data_keys_allowed, is_valid

__all__ = [
    "DEFAULT_PRIORITY",
    "NotificationParameters",
    "build_message",
    "compose_message",
    "data_keys_allowed",
    "is_valid",
]
