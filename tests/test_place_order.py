"""
Place order use case tests.
"""
import copy

import pytest

from apps.orders.application.dtos import PlaceOrderDTO
from apps.orders.application.use_cases import GetOrderQuery, GetOrderUseCase, PlaceOrderUseCase
from apps.orders.domain.events import OrderPlaced
from apps.orders.domain.exceptions import (
    CartAlreadyOrderedError,
    CheckoutInProgressError,
    EmptyCartError,
    OrderNotFoundError,
)
from apps.orders.domain.services import PricingPolicy
from apps.orders.domain.value_objects import OrderStatus, PaymentStatus
from shared.domain import AuthRequiredError, PersistenceError, ValidationError
from tests.conftest import InMemoryOrderRepository

USER_ID = 7


class FakeLock:
    def __init__(self, available=True):
        self.available = available
        self.released = False

    def acquire(self):
        return self.available

    def release(self):
        self.released = True


@pytest.fixture
def filled_cart(cart_repository):
    cart = cart_repository.load()
    cart.add_item('A', 'Product A', 1000, 'M', 'Black', 2, '/assets/a.jpg')
    cart.add_item('B', 'Product B', 3000, 'L', 'White', 1)
    cart_repository.save(cart)
    return cart


@pytest.fixture
def lock():
    return FakeLock()


@pytest.fixture
def place_order(order_repository, cart_repository, notifier, lock):
    return PlaceOrderUseCase(
        order_repository=order_repository,
        cart_repository=cart_repository,
        notifier=notifier,
        lock_factory=lambda user_id: lock,
    )


def test_places_order_with_computed_totals(place_order, order_repository, cart_repository,
                                           notifier, filled_cart, shipping_address, lock):
    result = place_order.execute(PlaceOrderDTO(USER_ID, shipping_address, 'upi'))
    order = result.data

    assert (order.subtotal, order.shipping, order.tax, order.total) == (5000, 0, 900, 5900)
    assert order.status == OrderStatus.CONFIRMED.value
    assert order.payment_status == PaymentStatus.PAID.value
    assert order.payment_method == 'upi'
    assert order.order_number.startswith('ORD-')
    assert [(i.product_id, i.size, i.color, i.quantity, i.price) for i in order.items] == [
        ('A', 'M', 'Black', 2, 1000),
        ('B', 'L', 'White', 1, 3000),
    ]
    assert order.items[0].product_image == '/assets/a.jpg'
    assert any(isinstance(e, OrderPlaced) for e in result.events)
    assert cart_repository.load().is_empty
    assert lock.released
    assert notifier.notifications[-1].title == 'Order placed successfully!'
    assert order.order_number in notifier.notifications[-1].description


def test_requires_user_before_any_write(place_order, order_repository, cart_repository,
                                        notifier, filled_cart, shipping_address):
    with pytest.raises(AuthRequiredError):
        place_order.execute(PlaceOrderDTO(None, shipping_address))
    assert order_repository.save_calls == 0
    assert cart_repository.load().total_items == 3
    assert notifier.notifications[0].is_destructive


def test_rejects_empty_cart_before_any_write(place_order, order_repository, shipping_address):
    with pytest.raises(EmptyCartError):
        place_order.execute(PlaceOrderDTO(USER_ID, shipping_address))
    assert order_repository.save_calls == 0


def test_rejects_invalid_address(place_order, order_repository, filled_cart, shipping_address):
    shipping_address['phone'] = '123'
    with pytest.raises(ValidationError) as exc_info:
        place_order.execute(PlaceOrderDTO(USER_ID, shipping_address))
    assert exc_info.value.field == 'phone'
    assert order_repository.save_calls == 0


def test_persistence_failure_keeps_cart(cart_repository, notifier, filled_cart,
                                        shipping_address, lock):
    failing = InMemoryOrderRepository(fail_with="connection reset")
    use_case = PlaceOrderUseCase(
        order_repository=failing,
        cart_repository=cart_repository,
        notifier=notifier,
        lock_factory=lambda user_id: lock,
    )
    with pytest.raises(PersistenceError):
        use_case.execute(PlaceOrderDTO(USER_ID, shipping_address))

    assert cart_repository.load().total_items == 3
    assert failing.orders == {}
    assert lock.released
    assert notifier.notifications[-1].title == 'Failed to place order'
    assert notifier.notifications[-1].description == 'connection reset'


def test_second_submission_is_rejected_while_locked(order_repository, cart_repository, notifier,
                                                    filled_cart, shipping_address):
    use_case = PlaceOrderUseCase(
        order_repository=order_repository,
        cart_repository=cart_repository,
        notifier=notifier,
        lock_factory=lambda user_id: FakeLock(available=False),
    )
    with pytest.raises(CheckoutInProgressError):
        use_case.execute(PlaceOrderDTO(USER_ID, shipping_address))
    assert order_repository.save_calls == 0
    assert cart_repository.load().total_items == 3


def test_confirmation_shows_stored_totals(place_order, order_repository, filled_cart, shipping_address):
    placed = place_order.execute(PlaceOrderDTO(USER_ID, shipping_address)).data

    # stored totals are read back, not recomputed from items
    stored = order_repository.orders[placed.id]
    stored.items[0].unit_price = 1

    confirmed = GetOrderUseCase(order_repository=order_repository).execute(
        GetOrderQuery(order_id=placed.id, user_id=USER_ID)
    ).data
    assert confirmed.total == placed.total == 5900
    assert confirmed.totals.tax == 900


def test_other_users_order_is_not_found(place_order, order_repository, filled_cart, shipping_address):
    placed = place_order.execute(PlaceOrderDTO(USER_ID, shipping_address)).data
    with pytest.raises(OrderNotFoundError):
        GetOrderUseCase(order_repository=order_repository).execute(
            GetOrderQuery(order_id=placed.id, user_id=USER_ID + 1)
        )


def test_empty_cart_is_reported(place_order, notifier, shipping_address):
    with pytest.raises(EmptyCartError):
        place_order.execute(PlaceOrderDTO(USER_ID, shipping_address))
    assert notifier.notifications[-1].title == 'Your bag is empty'
    assert notifier.notifications[-1].is_destructive


def test_replayed_cart_is_not_ordered_twice(place_order, order_repository, cart_repository,
                                            session, notifier, filled_cart, shipping_address):
    # the session as the browser held it before the first submission
    stale_session = copy.deepcopy(session)
    place_order.execute(PlaceOrderDTO(USER_ID, shipping_address))

    session.clear()
    session.update(stale_session)
    with pytest.raises(CartAlreadyOrderedError):
        place_order.execute(PlaceOrderDTO(USER_ID, shipping_address))

    assert len(order_repository.orders) == 1
    assert cart_repository.load().is_empty
    assert notifier.notifications[-1].title == 'Order already placed'


def test_order_keeps_threshold_of_its_policy(order_repository, cart_repository, notifier,
                                             filled_cart, shipping_address, lock):
    use_case = PlaceOrderUseCase(
        order_repository=order_repository,
        cart_repository=cart_repository,
        notifier=notifier,
        policy=PricingPolicy(free_shipping_threshold=8000),
        lock_factory=lambda user_id: lock,
    )
    order = use_case.execute(PlaceOrderDTO(USER_ID, shipping_address)).data

    assert order.shipping == 499
    assert order.totals.amount_to_free_shipping == 3000
