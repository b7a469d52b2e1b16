from .pricing import (
    FREE_SHIPPING_THRESHOLD,
    STANDARD_SHIPPING_FEE,
    TAX_RATE,
    OrderTotals,
    PricingPolicy,
    calculate_order_totals,
    round_half_up,
)

__all__ = [
    'FREE_SHIPPING_THRESHOLD',
    'STANDARD_SHIPPING_FEE',
    'TAX_RATE',
    'OrderTotals',
    'PricingPolicy',
    'calculate_order_totals',
    'round_half_up',
]
