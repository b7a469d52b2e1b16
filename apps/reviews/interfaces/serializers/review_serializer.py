"""
Review serializers.
"""
from rest_framework import serializers


class ReviewSerializer(serializers.Serializer):
    """Serializer for review output."""
    id = serializers.UUIDField(read_only=True)
    product_id = serializers.CharField(read_only=True)
    user_id = serializers.IntegerField(read_only=True)
    user_name = serializers.CharField(read_only=True)
    rating = serializers.IntegerField(read_only=True)
    title = serializers.CharField(read_only=True)
    comment = serializers.CharField(read_only=True)
    images = serializers.ListField(child=serializers.CharField(), read_only=True)
    is_verified_purchase = serializers.BooleanField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)


class ProductReviewsSerializer(serializers.Serializer):
    """Serializer for a product's reviews and rating summary."""
    product_id = serializers.CharField(read_only=True)
    reviews = ReviewSerializer(many=True, read_only=True)
    average_rating = serializers.FloatField(read_only=True)
    review_count = serializers.IntegerField(read_only=True)


class SubmitReviewSerializer(serializers.Serializer):
    """Serializer for a new review."""
    rating = serializers.IntegerField()
    title = serializers.CharField(max_length=200, required=False, allow_blank=True, default='')
    comment = serializers.CharField(allow_blank=True)
    images = serializers.ListField(
        child=serializers.CharField(max_length=500), required=False, default=list,
    )
