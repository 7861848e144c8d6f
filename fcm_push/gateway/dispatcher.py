"""Sends push notifications through the FCM legacy HTTP gateway."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Final

from fcm_push.config import Credential, Settings, get_settings
from fcm_push.errors import FailureKind, SendFailure, TransportError
from fcm_push.gateway.transport import GatewayResponse, HttpxTransport, Transport
from fcm_push.messages import DEFAULT_PRIORITY, NotificationParameters, build_message
from fcm_push.notifications import LoggingNotifier, Notifier

logger = logging.getLogger(__name__)

MODULE_NAME: Final = "Firebase Notification"
SERVICE_NAME: Final = "Firebase"


def build_headers(credential: Credential) -> dict[str, str]:
    """Content type and ``key=<server key>`` authorization for one request."""

    return {
        "Content-Type": "application/json",
        "Authorization": f"key={credential.server_key}",
    }


def _first_result(body: bytes) -> dict[str, Any] | None:
    try:
        document = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
        return None
    if not isinstance(document, dict):
        return None
    results = document.get("results")
    if not isinstance(results, list) or not results:
        return None
    first = results[0]
    return first if isinstance(first, dict) else None


def interpret_response(response: GatewayResponse) -> SendFailure | None:
    """Map a gateway response to None on success or the failure it describes.

    Common gateway errors are ``InvalidRegistration`` and ``NotRegistered``
    for bad device tokens; an invalid server key answers HTTP 401.
    """

    result = _first_result(response.body)
    error = result.get("error") if result is not None else None

    if response.status_code == 200:
        if result is None:
            return SendFailure(
                FailureKind.GATEWAY_REJECTION,
                "Gateway response has no results entry",
            )
        if error is None:
            return None
        return SendFailure(FailureKind.GATEWAY_REJECTION, str(error))

    reason = str(error) if error is not None else f"HTTP {response.status_code}"
    return SendFailure(FailureKind.GATEWAY_REJECTION, reason)


class PushDispatcher:
    """Send one notification per call to a single device token."""

    def __init__(
        self,
        credential: Credential,
        *,
        transport: Transport | None = None,
        notifier: Notifier | None = None,
        default_priority: str = DEFAULT_PRIORITY,
    ) -> None:
        self._credential = credential
        self._transport = transport or HttpxTransport()
        self._notifier = notifier or LoggingNotifier()
        self._default_priority = default_priority

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: Transport | None = None,
        notifier: Notifier | None = None,
    ) -> PushDispatcher:
        settings = settings or get_settings()
        return cls(
            Credential.from_accessor(settings),
            transport=transport
            or HttpxTransport(settings.fcm_request_timeout_seconds),
            notifier=notifier,
            default_priority=settings.fcm_default_priority,
        )

    async def send(
        self,
        token: str | None,
        parameters: Mapping[str, Any] | NotificationParameters,
    ) -> bool:
        """Send the push notification.

        Args:
            token: Device registration token.
            parameters: ``title`` and ``body`` for a visible alert, or a
                ``data`` map for a silent push. Optional: ``icon``,
                ``sound``, ``badge``, ``click_action``,
                ``content_available`` and ``priority``.

        Returns:
            True if the gateway accepted the push, False otherwise.
        """

        failure = await self._dispatch(token, parameters)
        if failure is None:
            return True

        if failure.kind is FailureKind.CALLER_INPUT:
            logger.info(f"Push notification not sent: {failure.reason}")
        else:
            self._report(failure)
        return False

    async def _dispatch(
        self,
        token: str | None,
        parameters: Mapping[str, Any] | NotificationParameters,
    ) -> SendFailure | None:
        if not token:
            return SendFailure(FailureKind.CALLER_INPUT, "Device token is missing")

        body = build_message(
            token, parameters, default_priority=self._default_priority
        )
        if body is None:
            return SendFailure(
                FailureKind.CALLER_INPUT,
                "Parameters need title and body, or an allowed data map",
            )

        try:
            response = await self._transport.post(
                self._credential.endpoint_url,
                build_headers(self._credential),
                body,
            )
        except asyncio.CancelledError:
            self._report(
                SendFailure(FailureKind.TRANSPORT, "Push request was cancelled")
            )
            raise
        except TransportError as e:
            return SendFailure(FailureKind.TRANSPORT, str(e))
        except Exception as e:
            logger.exception("Unexpected error from push transport")
            return SendFailure(FailureKind.TRANSPORT, f"Unexpected error: {str(e)}")

        return interpret_response(response)

    def _report(self, failure: SendFailure) -> None:
        try:
            self._notifier.notice(
                MODULE_NAME, failure.reason, SERVICE_NAME, kind=failure.kind
            )
        except Exception as e:
            logger.error(f"Failure notifier raised: {str(e)}")
