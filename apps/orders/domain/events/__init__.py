# Domain events
from .cart_changed import CartChanged, ITEM_ADDED, ITEM_UPDATED, ITEM_REMOVED, CART_CLEARED
from .order_placed import OrderPlaced

__all__ = [
    'CartChanged',
    'OrderPlaced',
    'ITEM_ADDED',
    'ITEM_UPDATED',
    'ITEM_REMOVED',
    'CART_CLEARED',
]
