"""
Orders app configuration.
Cart engine, checkout and order history.
"""
from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.orders'
    label = 'orders'
    verbose_name = 'Orders'

    def ready(self):
        # register admin
        from .interfaces import admin  # noqa: F401
