"""Tests for outbound message construction."""

import json
from datetime import datetime
from decimal import Decimal

import pytest

from fcm_push.messages.payload import (
    NotificationParameters,
    build_message,
    compose_message,
)


def test_build_alert_message() -> None:
    body = build_message("T1", {"title": "Hi", "body": "There"})

    assert body is not None
    document = json.loads(body)
    assert document == {
        "to": "T1",
        "priority": "high",
        "notification": {"title": "Hi", "body": "There"},
    }
    assert "data" not in document


def test_rejected_parameters_return_none() -> None:
    assert build_message("T1", {"icon": "bell"}) is None
    assert compose_message("T1", {"data": {"from": "me"}}) is None


def test_data_only_message_omits_notification_block() -> None:
    message = compose_message(
        "T1",
        {"data": {"order_id": "42"}, "icon": "bell", "sound": "default"},
    )

    assert message == {"to": "T1", "priority": "high", "data": {"order_id": "42"}}


def test_optional_notification_fields_are_included_when_present() -> None:
    message = compose_message(
        "T1",
        {
            "title": "Hi",
            "body": "There",
            "icon": "bell",
            "sound": "chime",
            "click_action": "OPEN_ORDER",
            "badge": 3,
        },
    )

    assert message is not None
    assert message["notification"] == {
        "title": "Hi",
        "body": "There",
        "icon": "bell",
        "sound": "chime",
        "click_action": "OPEN_ORDER",
        "badge": 3,
    }


def test_priority_override_wins_over_default() -> None:
    body = build_message("T1", {"title": "Hi", "body": "There", "priority": "normal"})

    assert body is not None
    assert json.loads(body)["priority"] == "normal"
    assert '"high"' not in body


def test_configured_default_priority_is_used_without_override() -> None:
    message = compose_message(
        "T1", {"title": "Hi", "body": "There"}, default_priority="normal"
    )

    assert message is not None
    assert message["priority"] == "normal"


@pytest.mark.parametrize("flag", [True, False])
def test_content_available_included_when_given(flag: bool) -> None:
    message = compose_message("T1", {"data": {"sync": "1"}, "content_available": flag})

    assert message is not None
    assert message["content_available"] is flag


def test_content_available_absent_by_default() -> None:
    message = compose_message("T1", {"title": "Hi", "body": "There"})

    assert message is not None
    assert "content_available" not in message


def test_reserved_data_is_dropped_from_alert() -> None:
    message = compose_message(
        "T1", {"title": "Hi", "body": "There", "data": {"google.sent": "x"}}
    )

    assert message is not None
    assert "data" not in message
    assert message["notification"] == {"title": "Hi", "body": "There"}


def test_alert_with_allowed_data_carries_both_blocks() -> None:
    message = compose_message(
        "T1", {"title": "Hi", "body": "There", "data": {"order_id": "42"}}
    )

    assert message is not None
    assert message["notification"] == {"title": "Hi", "body": "There"}
    assert message["data"] == {"order_id": "42"}


def test_unknown_parameters_are_ignored() -> None:
    message = compose_message(
        "T1", {"title": "Hi", "body": "There", "to": "T2", "color": "#fff"}
    )

    assert message is not None
    assert message["to"] == "T1"
    assert "color" not in message
    assert "color" not in message["notification"]


def test_accepts_notification_parameters_instance() -> None:
    parameters = NotificationParameters(title="Hi", body="There", badge="7")

    message = compose_message("T1", parameters)

    assert message is not None
    assert message["notification"]["badge"] == "7"


def test_to_mapping_skips_unset_fields() -> None:
    parameters = NotificationParameters.from_mapping(
        {"title": "Hi", "body": "There", "extra": 1}
    )

    assert parameters.to_mapping() == {"title": "Hi", "body": "There"}


def test_non_boolean_content_available_is_omitted() -> None:
    message = compose_message(
        "T1", {"title": "Hi", "body": "There", "content_available": "false"}
    )

    assert message is not None
    assert "content_available" not in message


@pytest.mark.parametrize(
    "value",
    [datetime(2024, 1, 1), {"a", "b"}, Decimal("1.5"), b"raw"],
)
def test_unserializable_data_rejects_message(value: object) -> None:
    assert build_message("T1", {"data": {"when": value}}) is None


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_numbers_reject_message(value: float) -> None:
    parameters = {"title": "Hi", "body": "There", "data": {"v": value}}

    assert build_message("T1", parameters) is None


def test_tuple_data_key_rejects_message() -> None:
    assert build_message("T1", {"data": {("a", "b"): "1"}}) is None
