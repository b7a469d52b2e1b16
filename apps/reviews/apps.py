"""
Reviews app configuration.
Product reviews with star ratings.
"""
from django.apps import AppConfig


class ReviewsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.reviews'
    label = 'reviews'
    verbose_name = 'Reviews'

    def ready(self):
        # register admin
        from .interfaces import admin  # noqa: F401
