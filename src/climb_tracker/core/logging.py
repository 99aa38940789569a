"""Logging for the climb_tracker package.

Reports are printed on stdout, so log records go to stderr and, when
configured, to a file.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from climb_tracker.core.config import LoggingSettings

PACKAGE_LOGGER = "climb_tracker"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# gpxpy logs every parse at DEBUG
QUIET_LOGGERS = ("gpxpy",)


def _build_handlers(log_file: Path | None) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    return handlers


def setup_logging(level: str = "INFO", log_file: str | Path | None = None) -> None:
    """Attach fresh handlers to the package logger.

    Handlers from an earlier call are closed first, so repeated calls do
    not leak file handles or duplicate output.

    Args:
        level: Log level name, case-insensitive
        log_file: Optional path to log file
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(log_level)

    for handler in _build_handlers(Path(log_file) if log_file else None):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_logging(settings: LoggingSettings, debug: bool = False) -> None:
    """Configure logging from the ``LOG_`` settings section.

    Args:
        settings: Logging section of the application settings
        debug: Log at DEBUG whatever level the settings name
    """
    if debug:
        settings = settings.model_copy(update={"level": "DEBUG"})

    setup_logging(settings.level, settings.file)


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the ``climb_tracker`` namespace."""
    if name != PACKAGE_LOGGER and not name.startswith(f"{PACKAGE_LOGGER}."):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)
