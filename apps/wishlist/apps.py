"""
Wishlist app configuration.
"""
from django.apps import AppConfig


class WishlistConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.wishlist'
    label = 'wishlist'
    verbose_name = 'Wishlist'
