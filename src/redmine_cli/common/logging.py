"""Logging setup for the ``redmine`` entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(name: str, level: str | int = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Configure the package logger.

    Records always go to stderr, leaving stdout to command output. When
    ``log_file`` is given (the LOG_FILE setting) they are appended there too.
    Calling this again only updates the level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper()) if isinstance(level, str) else level)

    if logger.handlers:
        return logger

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
