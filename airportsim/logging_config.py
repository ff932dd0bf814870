"""Logging configuration helpers for airportsim.

airportsim is silent by default: the package logger carries only a
NullHandler, and nothing is printed until one of the functions below is
called. The CLI calls them from its ``--log-level`` flag and from
``configure_from_env()``.

Example usage:
    import airportsim

    # Per-tick admission/allocation trace on stderr
    airportsim.enable_console_logging(level="DEBUG")

    # Rotating log file next to a batch of runs
    airportsim.enable_file_logging("logs/airport.log", max_bytes=5_000_000)

    # One JSON object per line
    airportsim.enable_json_logging()

Environment variables:
    AIRPORTSIM_LOGGING: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    AIRPORTSIM_LOG_FILE: Path to log file (enables rotating file logging)
    AIRPORTSIM_LOG_JSON: Set to "1" for JSON output
"""

from __future__ import annotations

import json
import logging
import os
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Literal

__all__ = [
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

DEFAULT_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
DEFAULT_BACKUP_COUNT = 5

LOGGER_NAME = "airportsim"

ENV_LEVEL = "AIRPORTSIM_LOGGING"
ENV_FILE = "AIRPORTSIM_LOG_FILE"
ENV_JSON = "AIRPORTSIM_LOG_JSON"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JsonFormatter(logging.Formatter):
    """Formats log records as single-line JSON objects.

    Example output:
        {"timestamp": "2025-10-01T09:00:00.000000+00:00", "level": "DEBUG",
         "logger": "airportsim.simulation", "message": "Tick 3: admitted 2"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def _get_level(level: str | int) -> int:
    """Convert a level name or int to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _attach(handler: logging.Handler, level: LogLevel | int) -> None:
    logger = _get_logger()
    logger.setLevel(_get_level(level))
    handler.setLevel(_get_level(level))
    logger.addHandler(handler)


def _clear_handlers() -> None:
    """Remove and close every handler on the package logger except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Send airportsim log records to stderr.

    Args:
        level: Log level name or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format, date_format))
    _attach(handler, level)
    return handler


def enable_file_logging(
    path: str | Path,
    level: LogLevel | int = "INFO",
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> RotatingFileHandler:
    """Write airportsim log records to a size-rotated file.

    Args:
        path: Path to the log file. Parent directories are created.
        level: Log level name or int.
        max_bytes: Maximum size of each log file in bytes.
        backup_count: Number of rotated files to keep.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created RotatingFileHandler.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter(format, date_format))
    _attach(handler, level)
    return handler


def enable_json_logging(
    level: LogLevel | int = "INFO",
    path: str | Path | None = None,
) -> logging.Handler:
    """Emit JSON log lines, to stderr or to a rotating file when ``path`` is set."""
    if path is None:
        handler: logging.Handler = logging.StreamHandler()
    else:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            path, maxBytes=DEFAULT_MAX_BYTES, backupCount=DEFAULT_BACKUP_COUNT
        )
    handler.setFormatter(JsonFormatter())
    _attach(handler, level)
    return handler


def configure_from_env() -> None:
    """Configure logging from AIRPORTSIM_* environment variables.

    Does nothing when neither a level nor a log file is set.
    """
    level = os.environ.get(ENV_LEVEL, "").upper()
    log_file = os.environ.get(ENV_FILE, "")
    use_json = os.environ.get(ENV_JSON, "") == "1"

    if not level and not log_file:
        return

    level = level or "INFO"

    if use_json:
        enable_json_logging(level=level, path=log_file or None)
    elif log_file:
        enable_file_logging(log_file, level=level)
    else:
        enable_console_logging(level=level)


def set_level(level: LogLevel | int) -> None:
    """Set the level of the airportsim package logger."""
    _get_logger().setLevel(_get_level(level))


def set_module_level(module: str, level: LogLevel | int) -> None:
    """Set the level for one submodule, e.g. ``set_module_level("simulation", "DEBUG")``."""
    logging.getLogger(f"{LOGGER_NAME}.{module}").setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the package logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
