"""
Structured logging utilities for the personnel toolkit.

Centralizes logging configuration so the CLI, the management service and the
collaborators log consistently. Uses standard library logging with a
human-readable formatter by default and an optional JSON formatter for
structured logs. Use-case audit lines go to the `personnel.audit` logger.

Usage:
    from personnel.utils.logging import configure_logging, get_logger

    configure_logging(level="INFO", json_logs=False)
    log = get_logger(__name__)
    log.info("Employee hired", extra={"employee_id": "EMP001"})
"""

from __future__ import annotations

import json
import logging
import logging.config
from typing import Any, Dict, Optional

AUDIT_LOGGER_NAME = "personnel.audit"

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_CORE_FIELDS = frozenset({"level", "logger", "message"})
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"asctime", "taskName"} | _CORE_FIELDS


def _json_formatter(record: logging.LogRecord) -> str:
    """Render a log record as JSON string."""
    payload: Dict[str, Any] = {
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    if record.exc_info:
        payload["exc_info"] = logging.Formatter().formatException(record.exc_info)
    if record.stack_info:
        payload["stack_info"] = record.stack_info
    for key, value in vars(record).items():
        if key in _RESERVED_ATTRS or key == "extra":
            continue
        payload[key] = value
    nested = getattr(record, "extra", None)
    if isinstance(nested, dict):
        payload.update({k: v for k, v in nested.items() if k not in _CORE_FIELDS})
    return json.dumps(payload, default=str)


class JsonFormatter(logging.Formatter):
    """Minimal JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        return _json_formatter(record)


def configure_logging(
    level: str = "INFO",
    json_logs: bool = False,
    force: bool = True,
) -> None:
    """
    Configure root logging.

    Parameters
    ----------
    level : str
        Logging level name (e.g., "DEBUG", "INFO", "WARNING").
    json_logs : bool
        Whether to emit logs as JSON. If False, uses a concise human formatter.
    force : bool
        Whether to replace an existing configuration. If False and the root
        logger already has handlers, the call is a no-op.
    """
    if not force and logging.getLogger().handlers:
        return

    formatter_name = "json" if json_logs else "console"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "console": {
                    "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
                "json": {
                    "()": JsonFormatter,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": formatter_name,
                    "level": level,
                }
            },
            "root": {
                "handlers": ["default"],
                "level": level,
            },
        }
    )


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given name. If name is None, returns the root logger.
    """
    return logging.getLogger(name)


def get_audit_logger() -> logging.Logger:
    """Logger that records one line per completed or failed use case."""
    return logging.getLogger(AUDIT_LOGGER_NAME)


__all__ = [
    "AUDIT_LOGGER_NAME",
    "configure_logging",
    "get_logger",
    "get_audit_logger",
    "JsonFormatter",
]
