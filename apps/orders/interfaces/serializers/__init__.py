# Serializers
from .cart_serializer import (
    CartSerializer,
    CartItemSerializer,
    CartItemKeySerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
    CartVisibilitySerializer,
    OrderTotalsSerializer,
)
from .order_serializer import (
    OrderSerializer,
    OrderItemSerializer,
    OrderCreateSerializer,
    ShippingAddressSerializer,
)

__all__ = [
    'CartSerializer',
    'CartItemSerializer',
    'CartItemKeySerializer',
    'CartItemCreateSerializer',
    'CartItemUpdateSerializer',
    'CartVisibilitySerializer',
    'OrderTotalsSerializer',
    'OrderSerializer',
    'OrderItemSerializer',
    'OrderCreateSerializer',
    'ShippingAddressSerializer',
]
