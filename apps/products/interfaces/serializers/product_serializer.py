"""
Product serializers.
"""
from rest_framework import serializers


class ColorOptionSerializer(serializers.Serializer):
    name = serializers.CharField(read_only=True)
    hex = serializers.CharField(read_only=True)


class ProductSerializer(serializers.Serializer):
    """Serializer for product output."""
    id = serializers.CharField(read_only=True)
    name = serializers.CharField(read_only=True)
    price = serializers.IntegerField(read_only=True)
    price_display = serializers.CharField(read_only=True)
    original_price = serializers.IntegerField(read_only=True, allow_null=True)
    currency = serializers.CharField(read_only=True)
    category = serializers.CharField(read_only=True)
    subcategory = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    material = serializers.CharField(read_only=True)
    image = serializers.CharField(read_only=True)
    images = serializers.ListField(child=serializers.CharField(), read_only=True)
    sizes = serializers.ListField(child=serializers.CharField(), read_only=True)
    colors = ColorOptionSerializer(many=True, read_only=True)
    is_new = serializers.BooleanField(read_only=True)
    is_best_seller = serializers.BooleanField(read_only=True)
    is_on_sale = serializers.BooleanField(read_only=True)
    rating = serializers.FloatField(read_only=True)
    review_count = serializers.IntegerField(read_only=True)
