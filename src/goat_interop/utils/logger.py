"""Structured logging setup built on structlog."""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING, Any

import structlog

from goat_interop.utils.settings import get_settings

if TYPE_CHECKING:
    from goat_interop.utils.settings import LoggingSettings

_configured = False
_log_file: IO[str] | None = None


def _select_renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    if log_format == "plain":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "event"],
        )
    return structlog.dev.ConsoleRenderer(colors=False)


def _close_log_file() -> None:
    global _log_file  # noqa: PLW0603

    if _log_file is not None:
        _log_file.close()
        _log_file = None


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog from the logging settings.

    Output goes to stderr, or to ``log_file_path`` when one is configured.
    A log file opened by an earlier call is closed first.
    """
    global _configured, _log_file  # noqa: PLW0603

    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)

    _close_log_file()
    stream: IO[str]
    if settings.log_file_path:
        _log_file = open(settings.log_file_path, "a", encoding="utf-8")  # noqa: SIM115
        stream = _log_file
    else:
        stream = sys.stderr

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _select_renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def reset_logging() -> None:
    """Forget the current configuration so the next logger reconfigures."""
    global _configured  # noqa: PLW0603

    structlog.reset_defaults()
    _close_log_file()
    _configured = False
