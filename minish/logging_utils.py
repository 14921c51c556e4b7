"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from .config import normalize_log_level

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def _stderr_sink(message: str) -> None:
    # resolve sys.stderr per record so a swapped stream is honored
    sys.stderr.write(message)


def configure_logging(level: str = "WARNING") -> None:
    """Send minish log records to stderr at ``level``; later calls may change it."""

    global _CONFIGURED_LEVEL
    normalized = normalize_log_level(level)
    if normalized == _CONFIGURED_LEVEL:
        return
    logger.remove()
    logger.add(
        _stderr_sink,
        level=normalized,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    logger.enable("minish")
    _CONFIGURED_LEVEL = normalized


__all__ = ["configure_logging"]
