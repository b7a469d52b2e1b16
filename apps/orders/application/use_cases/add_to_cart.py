"""
Add to cart use case.
"""
from dataclasses import dataclass, field

from apps.products.domain.exceptions import ProductNotFoundError
from apps.products.domain.repositories.product_repository import ProductRepository
from shared.application import UseCase, UseCaseResult
from shared.domain import ValidationError
from shared.infrastructure.notifications import Notifier
from ...domain.repositories.cart_repository import CartRepository
from ...domain.services.pricing import PricingPolicy
from ..dtos.cart_dto import AddToCartDTO, CartDTO
from ..policies import get_pricing_policy


@dataclass
class AddToCartUseCase(UseCase[AddToCartDTO, CartDTO]):
    """
    Add a product variant to the session cart.

    Size and color must be chosen from the product's options before the cart
    is touched. The price is copied from the catalog at this moment. The
    returned events let the caller decide whether to open the cart drawer.
    """

    product_repository: ProductRepository
    cart_repository: CartRepository
    notifier: Notifier
    policy: PricingPolicy = field(default_factory=get_pricing_policy)

    def execute(self, input_dto: AddToCartDTO) -> UseCaseResult[CartDTO]:
        product = self.product_repository.find_by_id(input_dto.product_id)
        if product is None:
            raise ProductNotFoundError(input_dto.product_id)

        if not input_dto.size:
            raise ValidationError("Please select a size", field="size")
        if not input_dto.color:
            raise ValidationError("Please select a color", field="color")
        if not product.offers_size(input_dto.size):
            raise ValidationError(
                f"Size '{input_dto.size}' is not available for {product.name}", field="size"
            )
        if not product.offers_color(input_dto.color):
            raise ValidationError(
                f"Color '{input_dto.color}' is not available for {product.name}", field="color"
            )

        cart = self.cart_repository.load()
        cart.add_item(
            product_id=product.id,
            product_name=product.name,
            unit_price=product.price.amount,
            size=input_dto.size,
            color=input_dto.color,
            quantity=input_dto.quantity,
            product_image=product.image,
        )
        self.cart_repository.save(cart)

        self.notifier.notify(
            "Added to bag",
            f"{product.name} ({input_dto.size}, {input_dto.color}) has been added to your bag.",
        )
        return UseCaseResult.ok(
            CartDTO.from_entity(cart, cart.totals(self.policy)),
            events=cart.clear_domain_events(),
        )
