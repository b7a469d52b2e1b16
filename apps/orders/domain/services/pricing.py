"""
Order total computation.

The one place subtotal, shipping, tax and total are derived. Cart summaries,
the checkout quote and order creation all call calculate_order_totals; an
order stores the result and never recomputes it.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Protocol

from shared.domain import ValueObject

FREE_SHIPPING_THRESHOLD = 5000
STANDARD_SHIPPING_FEE = 499
TAX_RATE = Decimal('0.18')


class PricedLine(Protocol):
    unit_price: int
    quantity: int


def round_half_up(value: Decimal) -> int:
    """Round to the nearest minor unit, halves away from zero."""
    return int(value.quantize(Decimal('1'), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class PricingPolicy(ValueObject):
    """Shipping and tax parameters, all amounts in minor units."""
    free_shipping_threshold: int = FREE_SHIPPING_THRESHOLD
    standard_shipping_fee: int = STANDARD_SHIPPING_FEE
    tax_rate: Decimal = TAX_RATE

    def shipping_for(self, subtotal: int) -> int:
        # threshold is inclusive
        return 0 if subtotal >= self.free_shipping_threshold else self.standard_shipping_fee

    def tax_for(self, subtotal: int) -> int:
        return round_half_up(Decimal(subtotal) * Decimal(str(self.tax_rate)))


DEFAULT_POLICY = PricingPolicy()


@dataclass(frozen=True)
class OrderTotals(ValueObject):
    """Derived money summary of a list of line items."""
    subtotal: int
    shipping: int
    tax: int
    total: int
    free_shipping_threshold: int = FREE_SHIPPING_THRESHOLD

    @property
    def is_free_shipping(self) -> bool:
        return self.shipping == 0

    @property
    def amount_to_free_shipping(self) -> int:
        return max(0, self.free_shipping_threshold - self.subtotal)


def calculate_order_totals(
    items: Iterable[PricedLine],
    policy: PricingPolicy = DEFAULT_POLICY,
) -> OrderTotals:
    """Compute OrderTotals for any sequence of priced line items."""
    subtotal = sum(item.unit_price * item.quantity for item in items)
    shipping = policy.shipping_for(subtotal)
    tax = policy.tax_for(subtotal)
    return OrderTotals(
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=subtotal + shipping + tax,
        free_shipping_threshold=policy.free_shipping_threshold,
    )
