"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field, replace
from typing import List, Optional
from uuid import uuid4

from shared.domain import AggregateRoot
from ..events.cart_changed import (
    CartChanged,
    ITEM_ADDED,
    ITEM_UPDATED,
    ITEM_REMOVED,
    CART_CLEARED,
)
from ..exceptions import InvalidQuantityError
from ..services.pricing import DEFAULT_POLICY, OrderTotals, PricingPolicy, calculate_order_totals
from ..value_objects.line_item_key import LineItemKey
from .cart_item import CartItem


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class Cart(AggregateRoot):
    """
    Shopping cart owned by a single browsing session.

    At most one line item exists per (product_id, size, color). Totals are
    always derived from the current items. ``is_open`` tracks the cart
    drawer and is never changed by item mutations.
    """
    items: List[CartItem] = field(default_factory=list)
    is_open: bool = False

    @classmethod
    def create(cls) -> 'Cart':
        """Create an empty cart for a new session."""
        return cls()

    def add_item(
        self,
        product_id: str,
        product_name: str,
        unit_price: int,
        size: str,
        color: str,
        quantity: int = 1,
        product_image: str = "",
    ) -> CartItem:
        """Add a variant to the cart, merging with an existing line for the same key."""
        if not _is_int(quantity) or quantity < 1:
            raise InvalidQuantityError(quantity)
        existing = self.find_item(product_id, size, color)
        if existing:
            existing.quantity += quantity
            item = existing
        else:
            item = CartItem(
                product_id=product_id,
                product_name=product_name,
                unit_price=unit_price,
                size=size,
                color=color,
                quantity=quantity,
                product_image=product_image,
            )
            self.items.append(item)
        self._changed(ITEM_ADDED, item.key, item.quantity)
        return item

    def update_quantity(self, product_id: str, size: str, color: str, quantity: int) -> None:
        """Set the absolute quantity of a line; below 1 removes it."""
        if not _is_int(quantity):
            raise InvalidQuantityError(quantity)
        item = self.find_item(product_id, size, color)
        if item is None:
            return
        if quantity < 1:
            self.remove_item(product_id, size, color)
            return
        item.quantity = quantity
        self._changed(ITEM_UPDATED, item.key, quantity)

    def remove_item(self, product_id: str, size: str, color: str) -> None:
        """Remove an item from the cart."""
        key = LineItemKey(product_id=product_id, size=size, color=color)
        remaining = [item for item in self.items if item.key != key]
        if len(remaining) == len(self.items):
            return
        self.items = remaining
        self._changed(ITEM_REMOVED, key, 0)

    def clear(self) -> None:
        """
        Clear all items from the cart.

        The emptied cart gets a new id; an order is unique per cart id, so a
        stale copy of the old cart cannot be ordered a second time.
        """
        cleared_id = self.id
        self.items = []
        self.id = uuid4()
        self.touch()
        self.add_domain_event(CartChanged(cart_id=cleared_id, action=CART_CLEARED))

    def find_item(self, product_id: str, size: str, color: str) -> Optional[CartItem]:
        """Find an item in the cart by its identity key."""
        key = LineItemKey(product_id=product_id, size=size, color=color)
        for item in self.items:
            if item.key == key:
                return item
        return None

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def toggle(self) -> None:
        self.is_open = not self.is_open

    def totals(self, policy: PricingPolicy = DEFAULT_POLICY) -> OrderTotals:
        return calculate_order_totals(self.items, policy)

    def snapshot(self) -> List[CartItem]:
        """Detached copy of the line items."""
        return [replace(item) for item in self.items]

    def _changed(self, action: str, key: LineItemKey, quantity: int) -> None:
        self.touch()
        self.add_domain_event(
            CartChanged(
                cart_id=self.id,
                action=action,
                product_id=key.product_id,
                size=key.size,
                color=key.color,
                quantity=quantity,
            )
        )

    @property
    def total_items(self) -> int:
        """Get the total number of units, used for badge counts."""
        return sum(item.quantity for item in self.items)

    @property
    def total_price(self) -> int:
        """Calculate the cart subtotal."""
        return sum(item.subtotal for item in self.items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self.items) == 0
