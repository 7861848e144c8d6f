"""Builds the JSON payload expected by the FCM legacy HTTP API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Final

from fcm_push.messages.validation import data_keys_allowed, has_alert, is_valid

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY: Final = "high"

# Optional parameter -> key inside the "notification" block.
NOTIFICATION_FIELDS: Final[tuple[tuple[str, str], ...]] = (
    ("title", "title"),
    ("body", "body"),
    ("icon", "icon"),
    ("sound", "sound"),
    ("click_action", "click_action"),
    ("badge", "badge"),
)


@dataclass(frozen=True, slots=True)
class NotificationParameters:
    """Parameters accepted for a single push notification."""

    title: str | None = None
    body: str | None = None
    icon: str | None = None
    sound: str | None = None
    badge: int | str | None = None
    click_action: str | None = None
    content_available: bool | None = None
    priority: str | None = None
    data: Mapping[str, Any] | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> NotificationParameters:
        known = {item.name for item in fields(cls)}
        unknown = sorted(str(key) for key in raw if key not in known)
        if unknown:
            logger.debug(f"Ignoring unknown notification parameters: {unknown}")
        return cls(**{key: value for key, value in raw.items() if key in known})

    def to_mapping(self) -> dict[str, Any]:
        """Return only the parameters that were set."""

        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }


def _notification_block(parameters: Mapping[str, Any]) -> dict[str, Any]:
    return {
        wire_key: parameters[name]
        for name, wire_key in NOTIFICATION_FIELDS
        if parameters.get(name) is not None
    }


def compose_message(
    token: str,
    parameters: Mapping[str, Any] | NotificationParameters,
    *,
    default_priority: str = DEFAULT_PRIORITY,
) -> dict[str, Any] | None:
    """Merge mandatory and optional fields into the outbound message.

    Returns None when the parameters are neither an alert (title and body)
    nor a data-only push with an allowed ``data`` map.
    """

    if isinstance(parameters, NotificationParameters):
        params = parameters.to_mapping()
    else:
        params = NotificationParameters.from_mapping(parameters).to_mapping()

    if not is_valid(params):
        return None

    message: dict[str, Any] = {"to": token, "priority": default_priority}

    optional: dict[str, Any] = {}
    if params.get("priority"):
        optional["priority"] = params["priority"]
    if has_alert(params):
        optional["notification"] = _notification_block(params)
    content_available = params.get("content_available")
    if isinstance(content_available, bool):
        optional["content_available"] = content_available
    elif content_available is not None:
        logger.warning(
            f"Ignoring non-boolean content_available: {content_available!r}"
        )
    data = params.get("data")
    if isinstance(data, Mapping) and data_keys_allowed(data):
        optional["data"] = dict(data)

    message.update(optional)
    return message


def build_message(
    token: str,
    parameters: Mapping[str, Any] | NotificationParameters,
    *,
    default_priority: str = DEFAULT_PRIORITY,
) -> str | None:
    """Serialize the outbound message, or return None if it is rejected.

    Values in ``data`` that have no strict JSON form (datetimes, sets, NaN)
    reject the message.
    """

    message = compose_message(token, parameters, default_priority=default_priority)
    if message is None:
        return None
    try:
        return json.dumps(message, allow_nan=False)
    except (TypeError, ValueError) as e:
        logger.warning(f"Push payload is not JSON serializable: {str(e)}")
        return None
