"""User-facing notifications emitted by the stores."""

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Protocol

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    """Notification severity shown to the user."""

    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notification:
    """A single toast-style message."""

    message: str
    severity: Severity
    created_at: datetime


class Notifier(Protocol):
    """Interface for reporting operation outcomes to the user."""

    def notify(self, message: str, severity: Severity) -> None:
        """Publish a human-readable message."""


@dataclass
class NotificationCenter(Notifier):
    """Logs notifications and queues them until the UI drains them."""

    limit: int = 50
    _pending: deque[Notification] = field(init=False)

    def __post_init__(self) -> None:
        self._pending = deque(maxlen=self.limit)

    def notify(self, message: str, severity: Severity) -> None:
        """Record a notification."""
        level = logging.INFO if severity is Severity.SUCCESS else logging.WARNING
        logger.log(level, "Notification (%s): %s", severity.value, message)
        self._pending.append(
            Notification(
                message=message,
                severity=severity,
                created_at=datetime.now(tz=UTC),
            )
        )

    def pending(self) -> list[Notification]:
        """Return queued notifications without clearing them."""
        return list(self._pending)

    def drain(self) -> list[Notification]:
        """Return and clear queued notifications."""
        drained = list(self._pending)
        self._pending.clear()
        return drained
