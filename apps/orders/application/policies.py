"""
Storefront settings lookup.
"""
from decimal import Decimal

from django.conf import settings

from ..domain.services.pricing import (
    FREE_SHIPPING_THRESHOLD,
    STANDARD_SHIPPING_FEE,
    TAX_RATE,
    PricingPolicy,
)

CHECKOUT_LOCK_TIMEOUT = 30


def _storefront_settings() -> dict:
    return getattr(settings, 'STOREFRONT', {}) or {}


def get_pricing_policy() -> PricingPolicy:
    """Build the pricing policy from settings.STOREFRONT."""
    conf = _storefront_settings()
    return PricingPolicy(
        free_shipping_threshold=int(conf.get('FREE_SHIPPING_THRESHOLD', FREE_SHIPPING_THRESHOLD)),
        standard_shipping_fee=int(conf.get('STANDARD_SHIPPING_FEE', STANDARD_SHIPPING_FEE)),
        tax_rate=Decimal(str(conf.get('TAX_RATE', TAX_RATE))),
    )


def get_checkout_lock_timeout() -> int:
    return int(_storefront_settings().get('CHECKOUT_LOCK_TIMEOUT', CHECKOUT_LOCK_TIMEOUT))
