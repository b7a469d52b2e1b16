"""
Cart changed domain event.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from shared.domain import DomainEvent

ITEM_ADDED = 'added'
ITEM_UPDATED = 'updated'
ITEM_REMOVED = 'removed'
CART_CLEARED = 'cleared'


@dataclass(frozen=True)
class CartChanged(DomainEvent):
    """
    Raised on every change to cart contents.

    Visibility of the cart drawer is not part of this event; consumers decide
    for themselves whether a change should open it.
    """
    cart_id: UUID
    action: str
    product_id: Optional[str] = None
    size: Optional[str] = None
    color: Optional[str] = None
    quantity: int = 0
