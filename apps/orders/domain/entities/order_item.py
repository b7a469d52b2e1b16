"""
Order item entity.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import BaseEntity


@dataclass(kw_only=True)
class OrderItem(BaseEntity):
    """Frozen copy of a cart line written with the order."""
    order_id: Optional[UUID] = None
    product_id: str
    product_name: str
    product_image: str = ""
    size: str
    color: str
    quantity: int
    unit_price: int

    @classmethod
    def from_cart_item(cls, cart_item, order_id: UUID = None) -> 'OrderItem':
        return cls(
            order_id=order_id,
            product_id=cart_item.product_id,
            product_name=cart_item.product_name,
            product_image=cart_item.product_image,
            size=cart_item.size,
            color=cart_item.color,
            quantity=cart_item.quantity,
            unit_price=cart_item.unit_price,
        )

    @property
    def subtotal(self) -> int:
        """Calculate the item subtotal."""
        return self.unit_price * self.quantity
