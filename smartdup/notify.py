"""
User-facing notifications.

Notifications are fire-and-forget: the engine emits a short message and
an error flag, and the host decides how to present it.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Protocol

logger = logging.getLogger(__name__)


@dataclass
class Notification:
    message: str
    error: bool = False


class Notifier(Protocol):
    def notify(self, message: str, error: bool = False) -> None:
        ...


class LoggingNotifier:
    """Route notifications to the log."""

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def notify(self, message: str, error: bool = False) -> None:
        if error:
            self.log.error(message)
        else:
            self.log.info(message)


@dataclass
class CollectingNotifier:
    """Keep notifications in memory, e.g. for printing after a batch."""
    notifications: List[Notification] = field(default_factory=list)

    def notify(self, message: str, error: bool = False) -> None:
        self.notifications.append(Notification(message, error))

    @property
    def messages(self) -> List[str]:
        return [n.message for n in self.notifications]

    @property
    def errors(self) -> List[str]:
        return [n.message for n in self.notifications if n.error]
