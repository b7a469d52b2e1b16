"""
Order entity (Aggregate Root).
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional
from uuid import UUID

from shared.domain import AggregateRoot
from ..events.order_placed import OrderPlaced
from ..exceptions import EmptyCartError
from ..services.pricing import DEFAULT_POLICY, OrderTotals, PricingPolicy, calculate_order_totals
from ..value_objects.order_number import OrderNumber
from ..value_objects.order_status import OrderStatus, PaymentStatus
from ..value_objects.shipping_address import ShippingAddress
from .order_item import OrderItem


@dataclass(kw_only=True)
class Order(AggregateRoot):
    """
    A placed order.

    subtotal, shipping, tax and total are fixed when the order is placed and
    read back as stored; they are never recomputed from the items.
    cart_id is the cart the order was placed from; one order per cart.
    """
    order_number: OrderNumber
    user_id: Any
    cart_id: Optional[UUID] = None
    items: List[OrderItem] = field(default_factory=list)
    shipping_address: ShippingAddress
    payment_method: str = "card"
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    subtotal: int = 0
    shipping: int = 0
    tax: int = 0
    total: int = 0
    free_shipping_threshold: int = DEFAULT_POLICY.free_shipping_threshold

    @classmethod
    def place(
        cls,
        user_id: Any,
        cart_items: Iterable,
        shipping_address: ShippingAddress,
        payment_method: str = "card",
        policy: PricingPolicy = DEFAULT_POLICY,
        cart_id: Optional[UUID] = None,
    ) -> 'Order':
        """Factory method to create a confirmed, paid order from cart lines."""
        cart_items = list(cart_items)
        if not cart_items:
            raise EmptyCartError()
        totals = calculate_order_totals(cart_items, policy)
        order = cls(
            order_number=OrderNumber.generate(),
            user_id=user_id,
            cart_id=cart_id,
            shipping_address=shipping_address,
            payment_method=payment_method,
            # payment is simulated
            status=OrderStatus.CONFIRMED,
            payment_status=PaymentStatus.PAID,
            subtotal=totals.subtotal,
            shipping=totals.shipping,
            tax=totals.tax,
            total=totals.total,
            free_shipping_threshold=totals.free_shipping_threshold,
        )
        order.items = [OrderItem.from_cart_item(item, order_id=order.id) for item in cart_items]
        order.add_domain_event(
            OrderPlaced(
                order_id=order.id,
                order_number=order.order_number.value,
                user_id=user_id,
                total=order.total,
            )
        )
        return order

    @property
    def totals(self) -> OrderTotals:
        """Stored totals of the order."""
        return OrderTotals(
            subtotal=self.subtotal,
            shipping=self.shipping,
            tax=self.tax,
            total=self.total,
            free_shipping_threshold=self.free_shipping_threshold,
        )

    @property
    def item_count(self) -> int:
        """Get the total number of items."""
        return sum(item.quantity for item in self.items)
