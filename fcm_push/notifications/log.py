"""Notifier that writes failure reports to the standard logging tree."""

import logging

from fcm_push.errors import FailureKind
from fcm_push.notifications.base import Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """Log failure reports on a child logger named after the service."""

    def __init__(self, level: int = logging.WARNING) -> None:
        self._level = level

    def notice(
        self,
        module_name: str,
        error_text: str,
        service_name: str,
        *,
        kind: FailureKind = FailureKind.GATEWAY_REJECTION,
    ) -> None:
        channel = logger.getChild(service_name.lower() or "push")
        channel.log(
            self._level,
            f"{module_name}: {error_text}",
            extra={"failure_kind": kind.value},
        )
