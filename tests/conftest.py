"""Shared fixtures for gateway and payload tests."""

import sys
from collections.abc import Iterator
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import pytest

from fcm_push.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from the developer's environment and cached settings."""

    for name in (
        "FCM_SERVER_KEY",
        "FCM_ENDPOINT",
        "FCM_REQUEST_TIMEOUT_SECONDS",
        "FCM_DEFAULT_PRIORITY",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(ROOT_DIR / "tests")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
