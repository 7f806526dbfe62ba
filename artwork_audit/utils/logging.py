"""Logging configuration utilities for artwork_audit."""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(
    level: str = "WARNING", format_string: str | None = None, filename: str | None = None
) -> None:
    """Configure application-wide logging.

    Can be called repeatedly; uses force=True to replace earlier handlers.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), case-insensitive.
        format_string: Custom format string; defaults to timestamp, logger and level.
        filename: Path to log file. If None, logs go to stderr so stdout stays clean for reports.
    """
    handlers: list[logging.Handler] = []
    if filename:
        handlers.append(logging.FileHandler(filename))
    else:
        handlers.append(logging.StreamHandler(sys.stderr))

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or DEFAULT_FORMAT,
        handlers=handlers,
        force=True,
    )
