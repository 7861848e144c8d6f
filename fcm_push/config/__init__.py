"""Configuration package."""

from fcm_push.config.credential import (
    ConfigurationAccessor,
    ConfigurationError,
    Credential,
)
from fcm_push.config.settings import Settings, get_settings

__all__ = [
    "ConfigurationAccessor",
    "ConfigurationError",
    "Credential",
    "Settings",
    "get_settings",
]
