"""
Orders admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.order_model import OrderModel, OrderItemModel


class OrderItemInline(admin.TabularInline):
    """Inline for order items."""
    model = OrderItemModel
    extra = 0
    readonly_fields = (
        'id', 'product_id', 'product_name', 'size', 'color', 'quantity', 'price',
    )


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    """Admin configuration for Order model."""
    list_display = ('order_number', 'user', 'status', 'payment_status', 'total', 'created_at')
    list_filter = ('status', 'payment_status', 'created_at')
    search_fields = ('order_number', 'user__email')
    ordering = ('-created_at',)
    readonly_fields = (
        'id', 'order_number', 'cart_id', 'subtotal', 'shipping', 'tax', 'total',
        'free_shipping_threshold', 'shipping_address', 'created_at', 'updated_at',
    )
    inlines = [OrderItemInline]
