"""
Utilities package for the personnel toolkit.

Exports shared helpers for logging and other cross-cutting concerns.
Keep this package lightweight and free of domain-specific logic.
"""

from personnel.utils.logging import (
    AUDIT_LOGGER_NAME,
    configure_logging,
    get_audit_logger,
    get_logger,
)

__all__ = [
    "AUDIT_LOGGER_NAME",
    "configure_logging",
    "get_audit_logger",
    "get_logger",
]
