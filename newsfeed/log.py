"""Logging setup for the newsfeed CLI."""

from __future__ import annotations

import logging
import os
import sys

_LEVEL_COLORS = {
    logging.DEBUG: "\033[2m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[1;31m",
}
_RESET = "\033[0m"


def _color_enabled() -> bool:
    return not os.environ.get("NO_COLOR")


class _LevelFormatter(logging.Formatter):
    """Plain message for INFO; level-prefixed (and colored) otherwise."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        if record.levelno == logging.INFO:
            return message
        prefix = f"{record.levelname}: "
        color = _LEVEL_COLORS.get(record.levelno)
        if color and _color_enabled():
            return f"{color}{prefix}{message}{_RESET}"
        return f"{prefix}{message}"


def configure_logging(
    stream_level: int = logging.INFO,
    ignore_libs: list[str] | None = None,
) -> None:
    """Route log records to stderr, replacing any previously installed handlers."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(stream_level)
    handler.setFormatter(_LevelFormatter("%(message)s"))
    root.addHandler(handler)
    root.setLevel(stream_level)

    for lib in ignore_libs or []:
        logging.getLogger(lib).setLevel(logging.WARNING)
