# Shared interfaces module
from .exception_handlers import custom_exception_handler
from .notifications import get_notifier, with_notifications
from .pagination import StandardPagination

__all__ = ['custom_exception_handler', 'get_notifier', 'with_notifications', 'StandardPagination']
