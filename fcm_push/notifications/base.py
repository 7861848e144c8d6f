"""Failure report sinks for push delivery problems."""

from abc import ABC, abstractmethod

from fcm_push.errors import FailureKind


class Notifier(ABC):
    """Base protocol for failure report sinks."""

    @abstractmethod
    def notice(
        self,
        module_name: str,
        error_text: str,
        service_name: str,
        *,
        kind: FailureKind = FailureKind.GATEWAY_REJECTION,
    ) -> None:
        """Record a failed push delivery.

        Args:
            module_name: Component that produced the failure.
            error_text: Gateway error code or transport error description.
            service_name: Channel the report belongs to.
            kind: Whether the gateway rejected the push or it never arrived.

        Implementations must not block; the report does not affect the
        outcome returned to the caller.
        """
        ...
