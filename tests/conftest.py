"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. Test doubles
live in helpers.py. No test touches the network.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from search_filter.utils import configure_logging

_SETTINGS_ENV = (
    "GOOGLE_API_KEY",
    "GOOGLE_SEARCH_ENGINE_ID",
    "DEFAULT_MAX_RESULTS",
    "REQUEST_TIMEOUT",
    "LOG_LEVEL",
    "LOG_FILE",
    "JSON_LOGS",
)


@pytest.fixture(scope="session", autouse=True)
def _quiet_logging() -> None:
    """Route structlog through stdlib so events never reach stdout."""
    configure_logging(log_level="WARNING")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Clear settings from the environment and keep .env files out of reach."""
    for key in _SETTINGS_ENV:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Minimal valid provider credentials."""
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    monkeypatch.setenv("GOOGLE_SEARCH_ENGINE_ID", "test-cx")


@pytest.fixture
def utc() -> Callable[..., datetime]:
    """Build a UTC datetime: utc(2024, 1, 1)."""

    def _utc(*args: int) -> datetime:
        return datetime(*args, tzinfo=timezone.utc)

    return _utc
