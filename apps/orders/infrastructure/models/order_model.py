"""
Order Django ORM models.
"""
import uuid

from django.conf import settings
from django.db import models

from ...domain.value_objects.order_status import OrderStatus, PaymentStatus


class OrderModel(models.Model):
    """Order header with totals fixed at creation."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order_number = models.CharField(max_length=50, unique=True, db_index=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='orders',
    )
    status = models.CharField(
        max_length=20,
        choices=OrderStatus.choices(),
        default=OrderStatus.PENDING.value,
        db_index=True,
    )
    payment_status = models.CharField(
        max_length=20,
        choices=PaymentStatus.choices(),
        default=PaymentStatus.PENDING.value,
    )
    payment_method = models.CharField(max_length=50, default='card')
    # one order per session cart
    cart_id = models.UUIDField(unique=True, null=True, blank=True, editable=False)

    # Amounts in minor units
    subtotal = models.PositiveIntegerField(default=0)
    shipping = models.PositiveIntegerField(default=0)
    tax = models.PositiveIntegerField(default=0)
    total = models.PositiveIntegerField(default=0)
    free_shipping_threshold = models.PositiveIntegerField(default=5000)

    shipping_address = models.JSONField(default=dict)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']

    def __str__(self):
        return self.order_number


class OrderItemModel(models.Model):
    """Order item snapshot."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    order = models.ForeignKey(OrderModel, on_delete=models.CASCADE, related_name='items')
    product_id = models.CharField(max_length=64)
    product_name = models.CharField(max_length=255)
    product_image = models.CharField(max_length=500, blank=True)
    size = models.CharField(max_length=20, blank=True)
    color = models.CharField(max_length=50, blank=True)
    quantity = models.PositiveIntegerField(default=1)
    price = models.PositiveIntegerField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'order_items'
        ordering = ['created_at']

    def __str__(self):
        return f"{self.product_name} ({self.size}/{self.color}) x {self.quantity}"
