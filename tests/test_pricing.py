"""
Order total computation tests.
"""
from dataclasses import dataclass
from decimal import Decimal

import pytest

from apps.orders.domain.services.pricing import (
    PricingPolicy,
    calculate_order_totals,
    round_half_up,
)


@dataclass
class Line:
    unit_price: int
    quantity: int


class TestShipping:

    def test_below_threshold_pays_standard_fee(self):
        assert calculate_order_totals([Line(4999, 1)]).shipping == 499

    def test_threshold_is_inclusive(self):
        assert calculate_order_totals([Line(5000, 1)]).shipping == 0

    def test_amount_to_free_shipping(self):
        totals = calculate_order_totals([Line(1200, 2)])
        assert totals.amount_to_free_shipping == 2600
        assert not totals.is_free_shipping
        assert calculate_order_totals([Line(6000, 1)]).amount_to_free_shipping == 0


class TestTax:

    @pytest.mark.parametrize('subtotal,expected', [
        (1000, 180),
        (1001, 180),
        (1005, 181),
        (0, 0),
    ])
    def test_tax_rounds_to_nearest_minor_unit(self, subtotal, expected):
        assert calculate_order_totals([Line(subtotal, 1)]).tax == expected

    def test_half_rounds_up(self):
        # 0.18 * 25 = 4.5
        assert calculate_order_totals([Line(25, 1)]).tax == 5
        assert round_half_up(Decimal('2.5')) == 3


def test_two_lines_end_to_end():
    totals = calculate_order_totals([Line(1000, 2), Line(3000, 1)])
    assert totals.subtotal == 5000
    assert totals.shipping == 0
    assert totals.tax == 900
    assert totals.total == 5900


def test_empty_items():
    totals = calculate_order_totals([])
    assert totals.subtotal == 0
    assert totals.tax == 0
    assert totals.total == totals.shipping


def test_custom_policy():
    policy = PricingPolicy(free_shipping_threshold=10000, standard_shipping_fee=99, tax_rate=Decimal('0.05'))
    totals = calculate_order_totals([Line(5000, 1)], policy)
    assert totals.shipping == 99
    assert totals.tax == 250
    assert totals.total == 5349
