# xaml_autouid/logging_setup.py
"""
Logging configuration for the command line tool.
Console output goes to stderr so stdout keeps the per-file report.
"""

import logging
import os
import sys
from datetime import datetime
from typing import Optional, TextIO

from .constants import LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "xaml_autouid"

# Module-level logger cache
_loggers: dict = {}
_handler: Optional[logging.Handler] = None


class AutoUidLogFormatter(logging.Formatter):
    """Formatter with a millisecond timestamp and padded level."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        level = record.levelname.ljust(8)
        message = record.getMessage()

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return f"[{timestamp}] [{level}] {record.name}: {message}"


def resolve_level(verbose: bool = False) -> int:
    """
    Pick the console log level.

    Args:
        verbose: Force DEBUG output

    Returns:
        A logging level; WARNING unless the environment or verbose says otherwise
    """
    if verbose:
        return logging.DEBUG
    name = os.getenv(LOG_LEVEL_ENV, "").strip().upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def setup_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> None:
    """
    Install the console handler on the package logger.

    Calling it again replaces the handler, so repeated CLI invocations in one
    process do not duplicate output.
    """
    global _handler

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    if _handler is not None:
        root_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(stream or sys.stderr)
    _handler.setLevel(level)
    _handler.setFormatter(AutoUidLogFormatter())
    root_logger.addHandler(_handler)
    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger under the package namespace
    """
    if name not in _loggers:
        if name.startswith(ROOT_LOGGER_NAME):
            _loggers[name] = logging.getLogger(name)
        else:
            _loggers[name] = logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

    return _loggers[name]
