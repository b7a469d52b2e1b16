"""
Order serializers.
"""
from rest_framework import serializers

from .cart_serializer import OrderTotalsSerializer


class ShippingAddressSerializer(serializers.Serializer):
    """Shipping address input and output. Length rules live in the domain."""
    name = serializers.CharField(allow_blank=True, required=False, default="")
    address = serializers.CharField(allow_blank=True, required=False, default="")
    city = serializers.CharField(allow_blank=True, required=False, default="")
    postal_code = serializers.CharField(allow_blank=True, required=False, default="")
    country = serializers.CharField(allow_blank=True, required=False, default="")
    phone = serializers.CharField(allow_blank=True, required=False, default="")


class OrderItemSerializer(serializers.Serializer):
    """Serializer for order item output."""
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    product_image = serializers.CharField(read_only=True)
    size = serializers.CharField(read_only=True)
    color = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    price = serializers.IntegerField(read_only=True)


class OrderSerializer(serializers.Serializer):
    """Serializer for order output."""
    id = serializers.UUIDField(read_only=True)
    order_number = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    payment_status = serializers.CharField(read_only=True)
    payment_method = serializers.CharField(read_only=True)
    subtotal = serializers.IntegerField(read_only=True)
    shipping = serializers.IntegerField(read_only=True)
    tax = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    totals = OrderTotalsSerializer(read_only=True)
    shipping_address = ShippingAddressSerializer(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    item_count = serializers.IntegerField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class OrderCreateSerializer(serializers.Serializer):
    """Serializer for placing an order from the cart."""
    shipping_address = ShippingAddressSerializer()
    payment_method = serializers.CharField(max_length=50, default='card')
