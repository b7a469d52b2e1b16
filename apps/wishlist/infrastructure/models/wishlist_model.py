"""
Wishlist Django ORM models.
"""
from django.conf import settings
from django.db import models


class WishlistItemModel(models.Model):
    """A product saved by a user."""

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='wishlist_items',
    )
    product_id = models.CharField(max_length=64)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'wishlist'
        ordering = ['created_at', 'id']
        unique_together = ['user', 'product_id']

    def __str__(self):
        return f"User {self.user_id} - Product {self.product_id}"
