"""Local validation rules for notification parameters.

A request is either a user-visible alert, which needs a title and a body, or a
silent data-only push, which needs a ``data`` payload. Anything else is
rejected before a network call is attempted.
"""

import re
from collections.abc import Mapping
from typing import Any, Final

# Not the gateway's full reserved word list, only the common collisions:
# "from" and any key starting with "google" or "gcm".
RESERVED_KEY_PATTERN: Final = re.compile(r"(^from$)|(^gcm)|(^google)")


def _is_filled(value: object) -> bool:
    return value is not None and value != ""


def data_keys_allowed(data: Mapping[str, Any]) -> bool:
    """Return False when any ``data`` key collides with a reserved gateway field."""

    for key in data:
        if RESERVED_KEY_PATTERN.search(str(key)):
            return False
    return True


def has_alert(parameters: Mapping[str, Any]) -> bool:
    """True when both title and body are present and non-empty."""

    return _is_filled(parameters.get("title")) and _is_filled(parameters.get("body"))


def has_allowed_data(parameters: Mapping[str, Any]) -> bool:
    data = parameters.get("data")
    if not isinstance(data, Mapping):
        return False
    return data_keys_allowed(data)


def is_valid(parameters: Mapping[str, Any]) -> bool:
    """Check that parameters describe either an alert or a data-only push."""

    return has_alert(parameters) or has_allowed_data(parameters)
