"""
Cart engine tests.
"""
import pytest

from apps.orders.domain.events import CartChanged, ITEM_ADDED, ITEM_REMOVED, CART_CLEARED
from apps.orders.domain.exceptions import InvalidQuantityError


def add_blazer(cart, quantity=1, size='M', color='Black'):
    return cart.add_item('2', 'Tailored Wool Blazer', 24999, size, color, quantity)


class TestAddItem:

    def test_same_key_merges_into_one_line(self, cart):
        for quantity in (1, 2, 4):
            add_blazer(cart, quantity)
        assert len(cart.items) == 1
        assert cart.items[0].quantity == 7

    def test_different_size_or_color_is_a_new_line(self, cart):
        add_blazer(cart)
        add_blazer(cart, size='L')
        add_blazer(cart, color='Navy')
        assert len(cart.items) == 3
        assert cart.total_items == 3

    def test_price_is_frozen_at_add_time(self, cart):
        add_blazer(cart)
        cart.add_item('2', 'Tailored Wool Blazer', 1, 'M', 'Black', 1)
        assert cart.items[0].unit_price == 24999

    @pytest.mark.parametrize('quantity', [0, -3, 1.5, '2', True])
    def test_rejects_bad_quantity_without_touching_state(self, cart, quantity):
        add_blazer(cart, 2)
        with pytest.raises(InvalidQuantityError):
            add_blazer(cart, quantity)
        assert cart.items[0].quantity == 2
        assert len(cart.items) == 1

    def test_empty_size_and_color_are_valid_keys(self, cart):
        cart.add_item('1', 'Cashmere Wool Sweater', 12999, '', '', 1)
        cart.add_item('1', 'Cashmere Wool Sweater', 12999, '', '', 1)
        assert cart.items[0].quantity == 2

    def test_add_records_event_and_leaves_cart_closed(self, cart):
        add_blazer(cart)
        events = cart.clear_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], CartChanged)
        assert events[0].action == ITEM_ADDED
        assert events[0].product_id == '2'
        assert cart.is_open is False


class TestUpdateQuantity:

    @pytest.mark.parametrize('quantity', [0, -1])
    def test_below_one_removes_line(self, cart, quantity):
        add_blazer(cart, 3)
        cart.update_quantity('2', 'M', 'Black', quantity)
        assert cart.is_empty

    def test_sets_absolute_quantity(self, cart):
        add_blazer(cart, 3)
        cart.update_quantity('2', 'M', 'Black', 5)
        assert cart.items[0].quantity == 5

    def test_unknown_key_is_noop(self, cart):
        add_blazer(cart, 3)
        cart.clear_domain_events()
        cart.update_quantity('2', 'XL', 'Black', 5)
        cart.update_quantity('9', 'M', 'Black', 0)
        assert cart.items[0].quantity == 3
        assert cart.domain_events == []


class TestRemoveAndClear:

    def test_remove_only_matching_line(self, cart):
        add_blazer(cart)
        add_blazer(cart, size='L')
        cart.remove_item('2', 'M', 'Black')
        assert [item.size for item in cart.items] == ['L']

    def test_remove_missing_is_noop(self, cart):
        add_blazer(cart)
        cart.clear_domain_events()
        cart.remove_item('2', 'S', 'Black')
        assert len(cart.items) == 1
        assert cart.domain_events == []

    def test_remove_records_event(self, cart):
        add_blazer(cart)
        cart.clear_domain_events()
        cart.remove_item('2', 'M', 'Black')
        assert cart.clear_domain_events()[0].action == ITEM_REMOVED

    def test_clear(self, cart):
        add_blazer(cart, 2)
        cart.add_item('5', 'Merino Crewneck Sweater', 8999, 'L', 'Navy', 1)
        cart.clear()
        assert cart.items == []
        assert cart.total_items == 0
        assert cart.total_price == 0
        assert cart.clear_domain_events()[-1].action == CART_CLEARED

    def test_clear_starts_a_new_cart_id(self, cart):
        add_blazer(cart)
        old_id = cart.id
        cart.clear_domain_events()
        cart.clear()
        assert cart.id != old_id
        assert cart.clear_domain_events()[0].cart_id == old_id


def test_total_price_tracks_every_mutation(cart):
    def expected():
        return sum(item.unit_price * item.quantity for item in cart.items)

    steps = [
        lambda: cart.add_item('1', 'Cashmere Wool Sweater', 12999, 'S', 'Cream', 2),
        lambda: add_blazer(cart),
        lambda: cart.update_quantity('1', 'S', 'Cream', 4),
        lambda: add_blazer(cart, 3),
        lambda: cart.remove_item('1', 'S', 'Cream'),
        lambda: cart.update_quantity('2', 'M', 'Black', 0),
        lambda: cart.add_item('5', 'Merino Crewneck Sweater', 8999, 'L', 'Navy', 1),
    ]
    for step in steps:
        step()
        assert cart.total_price == expected()
        assert cart.totals().subtotal == expected()


def test_totals_for_two_lines(cart):
    cart.add_item('A', 'Product A', 1000, 'M', 'Black', 2)
    cart.add_item('B', 'Product B', 3000, 'L', 'White', 1)
    totals = cart.totals()
    assert (totals.subtotal, totals.shipping, totals.tax, totals.total) == (5000, 0, 900, 5900)


class TestVisibility:

    def test_toggle_is_independent_of_contents(self, cart):
        cart.open()
        add_blazer(cart)
        cart.remove_item('2', 'M', 'Black')
        assert cart.is_open is True
        cart.toggle()
        assert cart.is_open is False
        assert cart.items == []

    def test_visibility_changes_record_no_content_event(self, cart):
        cart.open()
        cart.close()
        assert cart.domain_events == []


def test_snapshot_is_detached(cart):
    add_blazer(cart, 2)
    snapshot = cart.snapshot()
    cart.update_quantity('2', 'M', 'Black', 9)
    assert snapshot[0].quantity == 2
