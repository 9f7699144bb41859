"""
Notification channels.

A channel delivers one already-rendered message. The notifier makes a single
synchronous `send` call per message; whatever a channel raises reaches the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Protocol, runtime_checkable

from personnel.config import Settings, get_settings
from personnel.utils.logging import get_logger

log = get_logger(__name__)


@runtime_checkable
class NotificationChannel(Protocol):
    def send(self, to: str, subject: str, body: str) -> None:
        ...


@dataclass(frozen=True)
class SentMessage:
    to: str
    subject: str
    body: str
    sent_at: datetime = field(default_factory=datetime.now)


class RecordingChannel:
    """
    Keeps every message in memory. Used by tests and the CLI demo.
    """

    def __init__(self) -> None:
        self._sent: List[SentMessage] = []

    def send(self, to: str, subject: str, body: str) -> None:
        self._sent.append(SentMessage(to=to, subject=subject, body=body))
        log.info(f"Recorded email to {to}: {subject}", extra={"to": to})

    @property
    def sent_messages(self) -> List[SentMessage]:
        return list(self._sent)

    def clear(self) -> None:
        self._sent.clear()


class LoggingSmtpChannel:
    """
    Logs the message it would hand to an SMTP relay.
    """

    def __init__(self, host: str, port: int, username: str, password: str) -> None:
        self.host = host
        self.port = port
        self.username = username
        self._password = password

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LoggingSmtpChannel":
        settings = settings or get_settings()
        return cls(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.smtp_username,
            password=settings.smtp_password,
        )

    def send(self, to: str, subject: str, body: str) -> None:
        log.info(
            f"Sending email via SMTP ({self.host}:{self.port}) to {to}: {subject}",
            extra={"to": to, "smtp_user": self.username, "body_chars": len(body)},
        )


__all__ = [
    "NotificationChannel",
    "SentMessage",
    "RecordingChannel",
    "LoggingSmtpChannel",
]
