"""
Wishlist service tests.
"""
import pytest

from apps.products.domain.exceptions import ProductNotFoundError
from apps.wishlist.application.services import WishlistService
from shared.domain import AuthRequiredError, PersistenceError

USER_ID = 3


@pytest.fixture
def service(wishlist_repository, notifier, product_repository):
    wishlist_repository.items[USER_ID] = ['1', '4']
    service = WishlistService(
        repository=wishlist_repository,
        notifier=notifier,
        user_id=USER_ID,
        product_repository=product_repository,
    )
    service.load()
    return service


def test_load_reads_saved_items(service):
    assert service.product_ids == ['1', '4']
    assert service.contains('4')
    assert not service.contains('2')


def test_add_keeps_item_on_success(service, wishlist_repository, notifier):
    service.add('2')
    assert service.product_ids == ['1', '4', '2']
    assert wishlist_repository.items[USER_ID] == ['1', '4', '2']
    assert notifier.notifications[-1].title == 'Added to wishlist'


def test_add_rolls_back_on_failure(service, wishlist_repository, notifier):
    wishlist_repository.fail_with = 'timeout'
    with pytest.raises(PersistenceError):
        service.add('2')
    assert service.product_ids == ['1', '4']
    assert notifier.notifications[-1].is_destructive
    assert notifier.notifications[-1].description == 'Failed to add item to wishlist'


def test_duplicate_add_keeps_item(service, wishlist_repository, notifier):
    # local copy is stale: the store already has the product
    wishlist_repository.items[USER_ID].append('6')
    service.add('6')
    assert service.contains('6')
    assert notifier.notifications[-1].title == 'Already in wishlist'
    assert not notifier.notifications[-1].is_destructive


def test_remove_restores_position_on_failure(service, wishlist_repository, notifier):
    wishlist_repository.fail_with = 'timeout'
    with pytest.raises(PersistenceError):
        service.remove('1')
    assert service.product_ids == ['1', '4']
    assert notifier.notifications[-1].description == 'Failed to remove item from wishlist'


def test_remove_on_success(service, wishlist_repository):
    service.remove('1')
    assert service.product_ids == ['4']
    assert wishlist_repository.items[USER_ID] == ['4']


def test_signed_out_add_is_rejected(wishlist_repository, notifier):
    service = WishlistService(repository=wishlist_repository, notifier=notifier)
    with pytest.raises(AuthRequiredError):
        service.add('1')
    assert wishlist_repository.items == {}
    assert notifier.notifications[0].title == 'Please sign in'


def test_signed_out_remove_is_a_no_op(wishlist_repository, notifier):
    service = WishlistService(repository=wishlist_repository, notifier=notifier)
    service.remove('1')
    assert notifier.notifications == []


def test_unknown_product_is_rejected(service, wishlist_repository):
    with pytest.raises(ProductNotFoundError):
        service.add('99')
    assert wishlist_repository.items[USER_ID] == ['1', '4']
