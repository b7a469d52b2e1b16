"""
Order DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from uuid import UUID

from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from .cart_dto import OrderTotalsDTO


@dataclass
class PlaceOrderDTO:
    """DTO for placing an order from the session cart."""
    user_id: Optional[Any]
    shipping_address: Dict[str, Any] = field(default_factory=dict)
    payment_method: str = "card"


@dataclass
class OrderItemDTO:
    """DTO for order item output."""
    id: UUID
    product_id: str
    product_name: str
    product_image: str
    size: str
    color: str
    quantity: int
    price: int

    @classmethod
    def from_entity(cls, item: OrderItem) -> 'OrderItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name=item.product_name,
            product_image=item.product_image,
            size=item.size,
            color=item.color,
            quantity=item.quantity,
            price=item.unit_price,
        )


@dataclass
class OrderDTO:
    """DTO for order output."""
    id: UUID
    order_number: str
    status: str
    payment_status: str
    payment_method: str
    subtotal: int
    shipping: int
    tax: int
    total: int
    totals: OrderTotalsDTO
    shipping_address: Dict[str, str]
    items: List[OrderItemDTO]
    item_count: int
    created_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> 'OrderDTO':
        """Create DTO from entity."""
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            status=order.status.value,
            payment_status=order.payment_status.value,
            payment_method=order.payment_method,
            subtotal=order.subtotal,
            shipping=order.shipping,
            tax=order.tax,
            total=order.total,
            totals=OrderTotalsDTO.from_totals(order.totals),
            shipping_address=order.shipping_address.to_dict(),
            items=[OrderItemDTO.from_entity(item) for item in order.items],
            item_count=order.item_count,
            created_at=order.created_at,
        )
