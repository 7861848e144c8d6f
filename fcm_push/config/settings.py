"""Application settings loaded from environment variables."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT = "https://fcm.googleapis.com/fcm/send"
VALID_PRIORITIES = ("high", "normal")

# Accessor keys mapped to settings attributes
_ACCESSOR_KEYS = {
    "server_key": "fcm_server_key",
    "endpoint": "fcm_endpoint",
}


class Settings(BaseSettings):
    """Runtime configuration for the push gateway client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: str = "fcm-push"
    log_level: str = "INFO"

    fcm_server_key: str = Field(default="", repr=False)
    fcm_endpoint: str = DEFAULT_ENDPOINT
    fcm_request_timeout_seconds: float = Field(default=10.0, gt=0)
    fcm_default_priority: str = "high"

    @field_validator("fcm_endpoint", mode="before")
    @classmethod
    def _parse_endpoint(cls, value: object) -> str:
        if value is None:
            return DEFAULT_ENDPOINT
        endpoint = str(value).strip()
        if not endpoint:
            return DEFAULT_ENDPOINT
        if not endpoint.startswith(("https://", "http://")):
            raise ValueError("fcm_endpoint must be an http(s) URL")
        return endpoint

    @field_validator("fcm_default_priority", mode="before")
    @classmethod
    def _parse_default_priority(cls, value: object) -> str:
        if value is None:
            return "high"
        priority = str(value).strip().lower()
        if priority not in VALID_PRIORITIES:
            raise ValueError(
                f"Invalid fcm_default_priority: {value}. "
                f"Valid values are: {', '.join(VALID_PRIORITIES)} (case-insensitive)"
            )
        return priority

    def get(self, key: str) -> str:
        """Read a credential value by accessor key (``server_key``, ``endpoint``)."""

        try:
            attribute = _ACCESSOR_KEYS[key]
        except KeyError:
            raise KeyError(f"Unknown configuration key: {key}") from None
        return getattr(self, attribute)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()
