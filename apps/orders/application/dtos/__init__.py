from .cart_dto import (
    AddToCartDTO,
    CartItemKeyDTO,
    UpdateCartItemDTO,
    CartDTO,
    CartItemDTO,
    OrderTotalsDTO,
)
from .order_dto import PlaceOrderDTO, OrderDTO, OrderItemDTO

__all__ = [
    'AddToCartDTO',
    'CartItemKeyDTO',
    'UpdateCartItemDTO',
    'CartDTO',
    'CartItemDTO',
    'OrderTotalsDTO',
    'PlaceOrderDTO',
    'OrderDTO',
    'OrderItemDTO',
]
