"""Push notifications through the Firebase Cloud Messaging HTTP gateway."""

from fcm_push.config import ConfigurationError, Credential
from fcm_push.gateway import PushDispatcher
from fcm_push.messages import NotificationParameters

__all__ = [
    "ConfigurationError",
    "Credential",
    "NotificationParameters",
    "PushDispatcher",
]
