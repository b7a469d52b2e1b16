"""
Cart maintenance use cases: view, set quantity, remove, clear, visibility.
"""
from dataclasses import dataclass, field
from typing import Optional

from shared.application import UseCase, UseCaseResult
from shared.infrastructure.notifications import Notifier
from ...domain.repositories.cart_repository import CartRepository
from ...domain.services.pricing import PricingPolicy
from ..dtos.cart_dto import CartDTO, CartItemKeyDTO, OrderTotalsDTO, UpdateCartItemDTO
from ..policies import get_pricing_policy


@dataclass
class _CartUseCase:
    cart_repository: CartRepository
    policy: PricingPolicy = field(default_factory=get_pricing_policy)

    def _result(self, cart) -> UseCaseResult[CartDTO]:
        return UseCaseResult.ok(
            CartDTO.from_entity(cart, cart.totals(self.policy)),
            events=cart.clear_domain_events(),
        )


@dataclass
class GetCartUseCase(_CartUseCase, UseCase[None, CartDTO]):
    """Return the current cart with derived totals."""

    def execute(self, input_dto=None) -> UseCaseResult[CartDTO]:
        return self._result(self.cart_repository.load())


@dataclass
class GetCheckoutQuoteUseCase(_CartUseCase, UseCase[None, OrderTotalsDTO]):
    """Totals the shopper is quoted before placing the order."""

    def execute(self, input_dto=None) -> UseCaseResult[OrderTotalsDTO]:
        cart = self.cart_repository.load()
        return UseCaseResult.ok(OrderTotalsDTO.from_totals(cart.totals(self.policy)))


@dataclass
class UpdateCartItemUseCase(_CartUseCase, UseCase[UpdateCartItemDTO, CartDTO]):
    """Set a line's quantity; anything below 1 removes the line."""

    def execute(self, input_dto: UpdateCartItemDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.load()
        cart.update_quantity(
            input_dto.product_id, input_dto.size, input_dto.color, input_dto.quantity
        )
        self.cart_repository.save(cart)
        return self._result(cart)


@dataclass
class RemoveCartItemUseCase(_CartUseCase, UseCase[CartItemKeyDTO, CartDTO]):
    notifier: Optional[Notifier] = None

    def execute(self, input_dto: CartItemKeyDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.load()
        item = cart.find_item(input_dto.product_id, input_dto.size, input_dto.color)
        cart.remove_item(input_dto.product_id, input_dto.size, input_dto.color)
        self.cart_repository.save(cart)
        if item is not None and self.notifier is not None:
            self.notifier.notify("Removed from bag", f"{item.product_name} has been removed.")
        return self._result(cart)


@dataclass
class ClearCartUseCase(_CartUseCase, UseCase[None, CartDTO]):

    def execute(self, input_dto=None) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.load()
        cart.clear()
        self.cart_repository.save(cart)
        return self._result(cart)


@dataclass
class SetCartVisibilityUseCase(_CartUseCase, UseCase[bool, CartDTO]):
    """Open or close the cart drawer without touching its contents."""

    def execute(self, input_dto: bool) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.load()
        if input_dto:
            cart.open()
        else:
            cart.close()
        self.cart_repository.save(cart)
        return self._result(cart)
