from .notifier import (
    Notification,
    Notifier,
    LoggingNotifier,
    CollectingNotifier,
)

__all__ = ['Notification', 'Notifier', 'LoggingNotifier', 'CollectingNotifier']
