from .add_to_cart import AddToCartUseCase
from .manage_cart import (
    GetCartUseCase,
    GetCheckoutQuoteUseCase,
    UpdateCartItemUseCase,
    RemoveCartItemUseCase,
    ClearCartUseCase,
    SetCartVisibilityUseCase,
)
from .place_order import PlaceOrderUseCase, checkout_lock
from .get_order import GetOrderQuery, GetOrderUseCase, ListOrdersUseCase

__all__ = [
    'AddToCartUseCase',
    'GetCartUseCase',
    'GetCheckoutQuoteUseCase',
    'UpdateCartItemUseCase',
    'RemoveCartItemUseCase',
    'ClearCartUseCase',
    'SetCartVisibilityUseCase',
    'PlaceOrderUseCase',
    'checkout_lock',
    'GetOrderQuery',
    'GetOrderUseCase',
    'ListOrdersUseCase',
]
