"""
Cart use case tests.
"""
import pytest

from apps.orders.application.dtos import AddToCartDTO, CartItemKeyDTO, UpdateCartItemDTO
from apps.orders.application.use_cases import (
    AddToCartUseCase,
    ClearCartUseCase,
    GetCartUseCase,
    GetCheckoutQuoteUseCase,
    RemoveCartItemUseCase,
    SetCartVisibilityUseCase,
    UpdateCartItemUseCase,
)
from apps.products.domain.exceptions import ProductNotFoundError
from shared.domain import ValidationError


@pytest.fixture
def add_to_cart(product_repository, cart_repository, notifier):
    return AddToCartUseCase(
        product_repository=product_repository,
        cart_repository=cart_repository,
        notifier=notifier,
    )


class TestAddToCart:

    def test_adds_with_catalog_price(self, add_to_cart, cart_repository, notifier):
        result = add_to_cart.execute(AddToCartDTO(product_id='5', size='L', color='Navy', quantity=2))

        assert result.success
        assert result.data.total_items == 2
        assert result.data.total_price == 2 * 8999
        assert result.data.items[0].product_name == 'Merino Crewneck Sweater'
        assert cart_repository.load().items[0].unit_price == 8999
        assert notifier.notifications[0].title == 'Added to bag'

    def test_returns_change_event_but_does_not_open_cart(self, add_to_cart):
        result = add_to_cart.execute(AddToCartDTO(product_id='5', size='L', color='Navy'))
        assert [e.action for e in result.events] == ['added']
        assert result.data.is_open is False

    @pytest.mark.parametrize('size,color,field', [
        ('', 'Navy', 'size'),
        ('L', '', 'color'),
        ('XS', 'Navy', 'size'),
        ('L', 'Cream', 'color'),
    ])
    def test_rejects_unselected_or_unknown_options(
        self, add_to_cart, cart_repository, notifier, size, color, field
    ):
        with pytest.raises(ValidationError) as exc_info:
            add_to_cart.execute(AddToCartDTO(product_id='5', size=size, color=color))
        assert exc_info.value.field == field
        assert cart_repository.load().is_empty
        assert notifier.notifications == []

    def test_unknown_product(self, add_to_cart):
        with pytest.raises(ProductNotFoundError):
            add_to_cart.execute(AddToCartDTO(product_id='99', size='M', color='Black'))


def test_update_remove_clear_flow(add_to_cart, cart_repository, notifier):
    add_to_cart.execute(AddToCartDTO(product_id='2', size='M', color='Black'))
    add_to_cart.execute(AddToCartDTO(product_id='1', size='S', color='Cream'))

    result = UpdateCartItemUseCase(cart_repository=cart_repository).execute(
        UpdateCartItemDTO(product_id='2', size='M', color='Black', quantity=3)
    )
    assert result.data.total_items == 4

    result = RemoveCartItemUseCase(cart_repository=cart_repository, notifier=notifier).execute(
        CartItemKeyDTO(product_id='1', size='S', color='Cream')
    )
    assert [item.product_id for item in result.data.items] == ['2']
    assert notifier.notifications[-1].title == 'Removed from bag'

    result = ClearCartUseCase(cart_repository=cart_repository).execute()
    assert result.data.items == []
    assert result.data.total_items == 0


def test_quote_matches_cart_totals(add_to_cart, cart_repository):
    add_to_cart.execute(AddToCartDTO(product_id='6', size='S', color='Olive'))

    quote = GetCheckoutQuoteUseCase(cart_repository=cart_repository).execute().data
    cart = GetCartUseCase(cart_repository=cart_repository).execute().data

    assert quote == cart.totals
    assert quote.subtotal == 19999
    assert quote.shipping == 0
    assert quote.tax == 3600
    assert quote.total == 23599


def test_visibility_survives_reload(add_to_cart, cart_repository):
    add_to_cart.execute(AddToCartDTO(product_id='6', size='S', color='Olive'))
    SetCartVisibilityUseCase(cart_repository=cart_repository).execute(True)

    cart = cart_repository.load()
    assert cart.is_open is True
    assert cart.total_items == 1
