"""
Wishlist serializers.
"""
from rest_framework import serializers


class WishlistSerializer(serializers.Serializer):
    """Serializer for wishlist output."""
    product_ids = serializers.ListField(child=serializers.CharField(), read_only=True)
    count = serializers.IntegerField(read_only=True)


class WishlistItemSerializer(serializers.Serializer):
    """Serializer for adding or removing a product."""
    product_id = serializers.CharField(max_length=64)
