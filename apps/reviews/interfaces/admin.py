"""
Reviews admin configuration.
"""
from django.contrib import admin

from ..infrastructure.models.review_model import ReviewModel


@admin.register(ReviewModel)
class ReviewAdmin(admin.ModelAdmin):
    """Admin configuration for Review model."""
    list_display = ('product_id', 'user', 'rating', 'is_verified_purchase', 'created_at')
    list_filter = ('rating', 'is_verified_purchase', 'created_at')
    search_fields = ('product_id', 'title', 'user__email')
    ordering = ('-created_at',)
    readonly_fields = ('id', 'product_id', 'user', 'is_verified_purchase', 'created_at', 'updated_at')
