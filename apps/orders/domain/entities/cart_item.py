"""
Cart item entity.
"""
from dataclasses import dataclass

from ..value_objects.line_item_key import LineItemKey


@dataclass
class CartItem:
    """One product variant in the cart with a price frozen at add-time."""
    product_id: str
    product_name: str
    unit_price: int
    size: str
    color: str
    quantity: int = 1
    product_image: str = ""

    @property
    def key(self) -> LineItemKey:
        return LineItemKey(product_id=self.product_id, size=self.size, color=self.color)

    @property
    def subtotal(self) -> int:
        """Calculate the item subtotal."""
        return self.unit_price * self.quantity
