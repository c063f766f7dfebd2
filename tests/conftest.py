"""Shared pytest fixtures."""

from collections.abc import Iterator

import pytest

from goat_interop.utils.logger import reset_logging
from goat_interop.utils.settings import reset_goat_settings, reset_settings


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from fresh settings and logging configuration."""
    monkeypatch.setenv("LOG_LEVEL", "CRITICAL")
    for name in ("GOAT_INITIAL_INCREMENTS", "LOG_FORMAT", "LOG_FILE_PATH"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_goat_settings()
    reset_logging()
    yield
    reset_settings()
    reset_goat_settings()
    reset_logging()
