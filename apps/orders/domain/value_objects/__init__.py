# Value objects
from .line_item_key import LineItemKey
from .order_number import OrderNumber
from .order_status import OrderStatus, PaymentStatus
from .shipping_address import ShippingAddress

__all__ = ['LineItemKey', 'OrderNumber', 'OrderStatus', 'PaymentStatus', 'ShippingAddress']
