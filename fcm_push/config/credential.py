"""Gateway credential and the read-only accessor it is loaded from."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class ConfigurationError(RuntimeError):
    """Raised when the gateway credential cannot be used."""


class ConfigurationAccessor(Protocol):
    """Read-only configuration source supplying ``server_key`` and ``endpoint``."""

    def get(self, key: str) -> str: ...


@dataclass(frozen=True, slots=True)
class Credential:
    """Server key and endpoint used for every request of one dispatcher."""

    server_key: str = field(repr=False)
    endpoint_url: str

    def __post_init__(self) -> None:
        if not self.server_key or not self.server_key.strip():
            raise ConfigurationError("Firebase server key is not configured")
        if not self.endpoint_url or not self.endpoint_url.strip():
            raise ConfigurationError("Firebase endpoint is not configured")

    @classmethod
    def from_accessor(cls, accessor: ConfigurationAccessor) -> Credential:
        return cls(
            server_key=accessor.get("server_key"),
            endpoint_url=accessor.get("endpoint"),
        )
