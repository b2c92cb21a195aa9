"""Logging helpers for sqltags.

Every logger lives under the ``sqltags`` namespace. The compiler and the
executor attach query fields (``query``, ``operation``, ``parameter_count``,
``query_count``) to their records through ``extra``; :class:`QueryLogFormatter`
renders them as one JSON object per line.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

from sqltags._serialization import encode_json

if TYPE_CHECKING:
    from logging import LogRecord

__all__ = ("QUERY_FIELDS", "QueryLogFormatter", "configure_logging", "get_logger")

ROOT_LOGGER_NAME = "sqltags"

QUERY_FIELDS = ("query", "operation", "parameter_count", "query_count")
"""Record attributes copied into the JSON output when present"""


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``sqltags`` namespace.

    Args:
        name: Logger name. If not provided, returns the root sqltags logger.
    """
    if name is None:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


class QueryLogFormatter(logging.Formatter):
    """Format records as JSON, keeping the query fields set by the compiler and executor."""

    def format(self, record: LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update({field: getattr(record, field) for field in QUERY_FIELDS if hasattr(record, field)})
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return encode_json(entry)


def configure_logging(level: str = "INFO", json: bool = True) -> logging.Handler:
    """Send ``sqltags`` records to stdout.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json: Use :class:`QueryLogFormatter` instead of a plain text format.

    Returns:
        The installed handler.
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        QueryLogFormatter() if json else logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root_logger.addHandler(handler)
    # Don't propagate to the root Python logger
    root_logger.propagate = False
    return handler
