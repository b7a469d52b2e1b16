"""
Line item identity key.
"""
from dataclasses import dataclass

from shared.domain import ValueObject


@dataclass(frozen=True)
class LineItemKey(ValueObject):
    """
    Natural key of a cart line item.

    Empty size or color strings are valid keys; selection checks happen
    before a product reaches the cart.
    """
    product_id: str
    size: str
    color: str

    def __str__(self) -> str:
        return f"{self.product_id}/{self.size}/{self.color}"
