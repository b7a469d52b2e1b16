"""
User-facing notification sink.

Every mutation outcome (success or failure) produces one notification. The
API layer collects them per request and returns them next to the payload so
the storefront can show them as toasts.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Dict, List

logger = logging.getLogger('apps.notifications')

DEFAULT = 'default'
DESTRUCTIVE = 'destructive'


@dataclass(frozen=True)
class Notification:
    """A single user-visible message."""
    title: str
    description: str = ""
    variant: str = DEFAULT

    @property
    def is_destructive(self) -> bool:
        return self.variant == DESTRUCTIVE

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class Notifier:
    """Fire-and-forget notification sink."""

    def notify(self, title: str, description: str = "", variant: str = DEFAULT) -> Notification:
        notification = Notification(title=title, description=description, variant=variant)
        self.deliver(notification)
        return notification

    def error(self, title: str, description: str = "") -> Notification:
        return self.notify(title, description, variant=DESTRUCTIVE)

    def deliver(self, notification: Notification) -> None:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Writes notifications to the log only."""

    def deliver(self, notification: Notification) -> None:
        level = logging.WARNING if notification.is_destructive else logging.INFO
        logger.log(level, "%s: %s", notification.title, notification.description)


class CollectingNotifier(LoggingNotifier):
    """Logs and keeps notifications for the current request."""

    def __init__(self):
        self.notifications: List[Notification] = []

    def deliver(self, notification: Notification) -> None:
        super().deliver(notification)
        self.notifications.append(notification)

    def as_list(self) -> List[Dict[str, str]]:
        return [n.to_dict() for n in self.notifications]
