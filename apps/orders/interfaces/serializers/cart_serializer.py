"""
Cart serializers.
"""
from rest_framework import serializers


class OrderTotalsSerializer(serializers.Serializer):
    """Serializer for totals output."""
    subtotal = serializers.IntegerField(read_only=True)
    shipping = serializers.IntegerField(read_only=True)
    tax = serializers.IntegerField(read_only=True)
    total = serializers.IntegerField(read_only=True)
    is_free_shipping = serializers.BooleanField(read_only=True)
    amount_to_free_shipping = serializers.IntegerField(read_only=True)


class CartItemSerializer(serializers.Serializer):
    """Serializer for cart item output."""
    product_id = serializers.CharField(read_only=True)
    product_name = serializers.CharField(read_only=True)
    product_image = serializers.CharField(read_only=True)
    size = serializers.CharField(read_only=True)
    color = serializers.CharField(read_only=True)
    unit_price = serializers.IntegerField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    subtotal = serializers.IntegerField(read_only=True)


class CartSerializer(serializers.Serializer):
    """Serializer for cart output."""
    id = serializers.CharField(read_only=True)
    items = CartItemSerializer(many=True, read_only=True)
    total_items = serializers.IntegerField(read_only=True)
    total_price = serializers.IntegerField(read_only=True)
    totals = OrderTotalsSerializer(read_only=True)
    is_open = serializers.BooleanField(read_only=True)


class CartItemKeySerializer(serializers.Serializer):
    """Serializer identifying a cart line."""
    product_id = serializers.CharField(max_length=64)
    size = serializers.CharField(allow_blank=True, max_length=20, default="")
    color = serializers.CharField(allow_blank=True, max_length=50, default="")


class CartItemCreateSerializer(CartItemKeySerializer):
    """Serializer for adding item to cart."""
    quantity = serializers.IntegerField(min_value=1, default=1)


class CartItemUpdateSerializer(CartItemKeySerializer):
    """Serializer for updating cart item. Zero or less removes the line."""
    quantity = serializers.IntegerField()


class CartVisibilitySerializer(serializers.Serializer):
    is_open = serializers.BooleanField()
