from __future__ import annotations

import argparse
import asyncio
import json
import logging
from collections.abc import Sequence
from typing import Any, cast

from pydantic import ValidationError

from fcm_push.config import ConfigurationError, get_settings
from fcm_push.gateway import PushDispatcher
from fcm_push.messages import compose_message

logger = logging.getLogger(__name__)


def _parse_data_pairs(pairs: Sequence[str]) -> dict[str, str]:
    data: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"--data expects key=value, got {pair!r}")
        data[key.strip()] = value
    return data


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fcm-push",
        description="Send a push notification through the FCM HTTP gateway.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("send", "Send the notification to one device token."),
        ("preview", "Print the payload that would be sent, without sending."),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        _ = sub.add_argument("--token", required=True, help="Device token.")
        _ = sub.add_argument("--title", help="Notification title.")
        _ = sub.add_argument("--body", help="Notification body.")
        _ = sub.add_argument("--icon", help="Icon override.")
        _ = sub.add_argument("--sound", help="Sound override.")
        _ = sub.add_argument("--badge", help="App icon badge value.")
        _ = sub.add_argument("--click-action", help="Action identifier on tap.")
        _ = sub.add_argument(
            "--content-available",
            action="store_true",
            default=None,
            help="Mark as a silent background push.",
        )
        _ = sub.add_argument("--priority", help="Override the default priority.")
        _ = sub.add_argument(
            "--data",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Data payload entry (repeatable).",
        )

    return parser


def _collect_parameters(
    parser: argparse.ArgumentParser, parsed: argparse.Namespace
) -> dict[str, Any]:
    try:
        data = _parse_data_pairs(cast(list[str], parsed.data))
    except ValueError as e:
        parser.error(str(e))

    parameters: dict[str, Any] = {
        "title": parsed.title,
        "body": parsed.body,
        "icon": parsed.icon,
        "sound": parsed.sound,
        "badge": parsed.badge,
        "click_action": parsed.click_action,
        "content_available": parsed.content_available,
        "priority": parsed.priority,
        "data": data or None,
    }
    return {key: value for key, value in parameters.items() if value is not None}


async def _async_main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    parsed = parser.parse_args(argv)
    token = cast(str, parsed.token)
    parameters = _collect_parameters(parser, parsed)
    try:
        settings = get_settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration:\n{e}")
        return 2
    logging.getLogger("fcm_push").setLevel(settings.log_level.upper())

    if parsed.command == "preview":
        message = compose_message(
            token, parameters, default_priority=settings.fcm_default_priority
        )
        if message is None:
            print(json.dumps({"result": "rejected"}))
            return 1
        print(json.dumps(message, ensure_ascii=False, indent=2))
        return 0

    try:
        dispatcher = PushDispatcher.from_settings(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return 2

    sent = await dispatcher.send(token, parameters)
    print(json.dumps({"result": "success" if sent else "failure"}))
    return 0 if sent else 1


def main(argv: Sequence[str] | None = None) -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    raise SystemExit(asyncio.run(_async_main(argv)))


if __name__ == "__main__":
    main()
