# Repository implementations
from .django_order_repository import DjangoOrderRepository
from .session_cart_repository import SessionCartRepository

__all__ = ['DjangoOrderRepository', 'SessionCartRepository']
