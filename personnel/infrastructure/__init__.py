"""
Infrastructure package for the personnel toolkit.

Holds the collaborators that stand in for external systems: the persistence
connection used by the repository and the channels used by the notifier.
Keep this layer free of payroll and reporting rules.
"""

from personnel.infrastructure.channels import (
    LoggingSmtpChannel,
    NotificationChannel,
    RecordingChannel,
    SentMessage,
)
from personnel.infrastructure.database import (
    DatabaseConnection,
    InMemoryDatabaseConnection,
    LoggingDatabaseConnection,
    build_dsn,
    get_database_connection,
)

__all__ = [
    "DatabaseConnection",
    "InMemoryDatabaseConnection",
    "LoggingDatabaseConnection",
    "build_dsn",
    "get_database_connection",
    "NotificationChannel",
    "SentMessage",
    "RecordingChannel",
    "LoggingSmtpChannel",
]
