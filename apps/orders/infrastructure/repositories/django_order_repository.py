"""
Django ORM implementation of OrderRepository.
"""
from typing import Any, List, Optional
from uuid import UUID

from django.db import DatabaseError, IntegrityError, transaction

from shared.domain.exceptions import PersistenceError
from ...domain.entities.order import Order
from ...domain.entities.order_item import OrderItem
from ...domain.exceptions import CartAlreadyOrderedError
from ...domain.repositories.order_repository import OrderRepository
from ...domain.value_objects import OrderNumber, OrderStatus, PaymentStatus, ShippingAddress
from ..models.order_model import OrderModel, OrderItemModel


class DjangoOrderRepository(OrderRepository):
    """Django ORM based order repository implementation."""

    def save(self, order: Order) -> Order:
        """Write header and items in one transaction."""
        try:
            with transaction.atomic():
                header = self.insert_order_header(order)
                self.insert_order_items(header, order.items)
        except IntegrityError as e:
            if order.cart_id is not None and OrderModel.objects.filter(cart_id=order.cart_id).exists():
                raise CartAlreadyOrderedError(order.cart_id) from e
            raise PersistenceError(str(e), operation="save_order") from e
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="save_order") from e
        return self.find_by_id(order.id)

    def insert_order_header(self, order: Order) -> OrderModel:
        """Insert the order row with its stored totals."""
        return OrderModel.objects.create(
            id=order.id,
            order_number=order.order_number.value,
            user_id=order.user_id,
            cart_id=order.cart_id,
            status=order.status.value,
            payment_status=order.payment_status.value,
            payment_method=order.payment_method,
            subtotal=order.subtotal,
            shipping=order.shipping,
            tax=order.tax,
            total=order.total,
            free_shipping_threshold=order.free_shipping_threshold,
            shipping_address=order.shipping_address.to_dict(),
        )

    def insert_order_items(self, header: OrderModel, items: List[OrderItem]) -> None:
        """Insert the item snapshots for an order."""
        OrderItemModel.objects.bulk_create([
            OrderItemModel(
                id=item.id,
                order=header,
                product_id=item.product_id,
                product_name=item.product_name,
                product_image=item.product_image,
                size=item.size,
                color=item.color,
                quantity=item.quantity,
                price=item.unit_price,
            )
            for item in items
        ])

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        try:
            model = OrderModel.objects.prefetch_related('items').get(id=order_id)
        except OrderModel.DoesNotExist:
            return None
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="find_order") from e
        return self._to_entity(model)

    def find_by_user_id(self, user_id: Any) -> List[Order]:
        """Find orders by user ID, newest first."""
        try:
            models = list(
                OrderModel.objects.filter(user_id=user_id)
                .prefetch_related('items')
                .order_by('-created_at')
            )
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="list_orders") from e
        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: OrderModel) -> Order:
        """Convert Django model to domain entity."""
        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            user_id=model.user_id,
            cart_id=model.cart_id,
            items=[self._item_to_entity(item) for item in model.items.all()],
            shipping_address=ShippingAddress.from_stored(model.shipping_address),
            payment_method=model.payment_method,
            status=OrderStatus(model.status),
            payment_status=PaymentStatus(model.payment_status),
            subtotal=model.subtotal,
            shipping=model.shipping,
            tax=model.tax,
            total=model.total,
            free_shipping_threshold=model.free_shipping_threshold,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _item_to_entity(self, model: OrderItemModel) -> OrderItem:
        return OrderItem(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            product_name=model.product_name,
            product_image=model.product_image,
            size=model.size,
            color=model.color,
            quantity=model.quantity,
            unit_price=model.price,
            created_at=model.created_at,
        )
