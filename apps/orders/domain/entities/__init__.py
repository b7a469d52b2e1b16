# Domain entities
from .order import Order
from .order_item import OrderItem
from .cart import Cart
from .cart_item import CartItem

__all__ = ['Order', 'OrderItem', 'Cart', 'CartItem']
