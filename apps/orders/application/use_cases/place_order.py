"""
Place order use case.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from shared.application import UseCase, UseCaseResult
from shared.domain import AuthRequiredError, PersistenceError
from shared.infrastructure.cache.redis_cache import CacheLock, RedisCache
from shared.infrastructure.notifications import Notifier
from ...domain.entities.order import Order
from ...domain.exceptions import CartAlreadyOrderedError, CheckoutInProgressError, EmptyCartError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.repositories.order_repository import OrderRepository
from ...domain.services.pricing import PricingPolicy
from ...domain.value_objects.shipping_address import ShippingAddress
from ..dtos.order_dto import OrderDTO, PlaceOrderDTO
from ..policies import get_checkout_lock_timeout, get_pricing_policy

logger = logging.getLogger(__name__)


def checkout_lock(user_id: Any) -> CacheLock:
    """Per-user lock that keeps a second submission out while one is running."""
    return CacheLock(
        RedisCache(prefix='checkout'),
        key=str(user_id),
        timeout=get_checkout_lock_timeout(),
    )


@dataclass
class PlaceOrderUseCase(UseCase[PlaceOrderDTO, OrderDTO]):
    """
    Turn the session cart into a stored order.

    Preconditions are checked before anything is written: a signed-in user,
    a non-empty cart and a valid shipping address. The order header and its
    items are written together by the repository. The cart is cleared only
    after that write succeeds; on failure it is left as it was so the
    shopper can retry.

    Orders are unique per cart id and clearing the cart gives it a new id,
    so replaying the pre-checkout session cannot order the same cart twice.
    """

    order_repository: OrderRepository
    cart_repository: CartRepository
    notifier: Notifier
    policy: PricingPolicy = field(default_factory=get_pricing_policy)
    lock_factory: Optional[Callable[[Any], CacheLock]] = checkout_lock

    def execute(self, input_dto: PlaceOrderDTO) -> UseCaseResult[OrderDTO]:
        if input_dto.user_id is None:
            self.notifier.error("Please sign in", "You need to be signed in to place an order")
            raise AuthRequiredError("place an order")

        cart = self.cart_repository.load()
        if cart.is_empty:
            self.notifier.error("Your bag is empty", "Add something to your bag before checking out")
            raise EmptyCartError()

        shipping_address = ShippingAddress.from_dict(input_dto.shipping_address)

        lock = self.lock_factory(input_dto.user_id) if self.lock_factory else None
        if lock is not None and not lock.acquire():
            self.notifier.error("Order in progress", "Your order is already being placed")
            raise CheckoutInProgressError()

        try:
            order = Order.place(
                user_id=input_dto.user_id,
                cart_items=cart.snapshot(),
                shipping_address=shipping_address,
                payment_method=input_dto.payment_method or "card",
                policy=self.policy,
                cart_id=cart.id,
            )
            events = order.clear_domain_events()
            try:
                saved = self.order_repository.save(order)
            except CartAlreadyOrderedError:
                # a stale copy of a cart that was already ordered
                cart.clear()
                self.cart_repository.save(cart)
                self.notifier.error("Order already placed", "This bag has already been ordered")
                raise
            except PersistenceError as e:
                self.notifier.error("Failed to place order", e.message)
                raise
        finally:
            if lock is not None:
                lock.release()

        cart.clear()
        self.cart_repository.save(cart)
        events.extend(cart.clear_domain_events())

        logger.info(f"Order {saved.order_number} placed by user {input_dto.user_id}, total {saved.total}")
        self.notifier.notify(
            "Order placed successfully!",
            f"Your order {saved.order_number} has been confirmed.",
        )
        return UseCaseResult.ok(OrderDTO.from_entity(saved), events=events)
