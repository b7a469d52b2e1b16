"""
Cart DTOs.
"""
from dataclasses import dataclass
from typing import List

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.services.pricing import OrderTotals


@dataclass
class AddToCartDTO:
    """DTO for adding a product variant to the cart."""
    product_id: str
    size: str
    color: str
    quantity: int = 1


@dataclass
class CartItemKeyDTO:
    """DTO identifying a cart line."""
    product_id: str
    size: str
    color: str


@dataclass
class UpdateCartItemDTO(CartItemKeyDTO):
    """DTO for setting the quantity of a cart line."""
    quantity: int = 1


@dataclass
class OrderTotalsDTO:
    """DTO for totals output."""
    subtotal: int
    shipping: int
    tax: int
    total: int
    is_free_shipping: bool
    amount_to_free_shipping: int

    @classmethod
    def from_totals(cls, totals: OrderTotals) -> 'OrderTotalsDTO':
        return cls(
            subtotal=totals.subtotal,
            shipping=totals.shipping,
            tax=totals.tax,
            total=totals.total,
            is_free_shipping=totals.is_free_shipping,
            amount_to_free_shipping=totals.amount_to_free_shipping,
        )


@dataclass
class CartItemDTO:
    """DTO for cart item output."""
    product_id: str
    product_name: str
    product_image: str
    size: str
    color: str
    unit_price: int
    quantity: int
    subtotal: int

    @classmethod
    def from_entity(cls, item: CartItem) -> 'CartItemDTO':
        return cls(
            product_id=item.product_id,
            product_name=item.product_name,
            product_image=item.product_image,
            size=item.size,
            color=item.color,
            unit_price=item.unit_price,
            quantity=item.quantity,
            subtotal=item.subtotal,
        )


@dataclass
class CartDTO:
    """DTO for cart output."""
    id: str
    items: List[CartItemDTO]
    total_items: int
    total_price: int
    totals: OrderTotalsDTO
    is_open: bool

    @classmethod
    def from_entity(cls, cart: Cart, totals: OrderTotals) -> 'CartDTO':
        """Create DTO from entity."""
        return cls(
            id=str(cart.id),
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            total_items=cart.total_items,
            total_price=cart.total_price,
            totals=OrderTotalsDTO.from_totals(totals),
            is_open=cart.is_open,
        )
