"""
Pytest configuration and fixtures.
"""
from typing import Any, Dict, List, Optional
from uuid import UUID

import pytest
from django.core.cache import cache

from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.entities.order import Order
from apps.orders.domain.exceptions import CartAlreadyOrderedError
from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.products.infrastructure.repositories import StaticProductRepository
from apps.reviews.domain.entities import Review
from apps.reviews.domain.repositories import ReviewRepository
from apps.wishlist.domain.exceptions import DuplicateWishlistItemError
from apps.wishlist.domain.repositories.wishlist_repository import WishlistRepository
from shared.domain import PersistenceError
from shared.infrastructure.notifications import CollectingNotifier

VALID_ADDRESS = {
    'name': 'Asha Rao',
    'address': '12 MG Road',
    'city': 'Bengaluru',
    'postal_code': '560001',
    'country': 'India',
    'phone': '9876543210',
}


class InMemoryOrderRepository(OrderRepository):
    """Order store kept in a dict; can be told to fail."""

    def __init__(self, fail_with: Optional[str] = None):
        self.orders: Dict[UUID, Order] = {}
        self.fail_with = fail_with
        self.save_calls = 0

    def save(self, order: Order) -> Order:
        self.save_calls += 1
        if self.fail_with:
            raise PersistenceError(self.fail_with, operation="save_order")
        if order.cart_id is not None and any(o.cart_id == order.cart_id for o in self.orders.values()):
            raise CartAlreadyOrderedError(order.cart_id)
        self.orders[order.id] = order
        return order

    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        return self.orders.get(order_id)

    def find_by_user_id(self, user_id: Any) -> List[Order]:
        return sorted(
            (o for o in self.orders.values() if o.user_id == user_id),
            key=lambda o: o.created_at,
            reverse=True,
        )


class InMemoryWishlistRepository(WishlistRepository):
    """Wishlist store kept in a dict; can be told to fail."""

    def __init__(self):
        self.items: Dict[Any, List[str]] = {}
        self.fail_with: Optional[str] = None

    def find_product_ids(self, user_id: Any) -> List[str]:
        return list(self.items.get(user_id, []))

    def add(self, user_id: Any, product_id: str) -> None:
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        saved = self.items.setdefault(user_id, [])
        if product_id in saved:
            raise DuplicateWishlistItemError(product_id)
        saved.append(product_id)

    def remove(self, user_id: Any, product_id: str) -> None:
        if self.fail_with:
            raise PersistenceError(self.fail_with)
        saved = self.items.get(user_id, [])
        if product_id in saved:
            saved.remove(product_id)


class InMemoryReviewRepository(ReviewRepository):
    """Review store kept in a dict; can be told to fail."""

    def __init__(self):
        self.reviews: Dict[UUID, Review] = {}
        self.fail_with: Optional[str] = None

    def find_by_product_id(self, product_id: str) -> List[Review]:
        return sorted(
            (r for r in self.reviews.values() if r.product_id == product_id),
            key=lambda r: r.created_at,
            reverse=True,
        )

    def find_by_id(self, review_id: UUID) -> Optional[Review]:
        return self.reviews.get(review_id)

    def save(self, review: Review) -> Review:
        if self.fail_with:
            raise PersistenceError(self.fail_with, operation="save_review")
        self.reviews[review.id] = review
        return review

    def delete(self, review_id: UUID) -> None:
        if self.fail_with:
            raise PersistenceError(self.fail_with, operation="delete_review")
        self.reviews.pop(review_id, None)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def cart():
    return Cart.create()


@pytest.fixture
def session():
    return {}


@pytest.fixture
def cart_repository(session):
    from apps.orders.infrastructure.repositories.session_cart_repository import SessionCartRepository
    return SessionCartRepository(session)


@pytest.fixture
def product_repository():
    return StaticProductRepository()


@pytest.fixture
def order_repository():
    return InMemoryOrderRepository()


@pytest.fixture
def wishlist_repository():
    return InMemoryWishlistRepository()


@pytest.fixture
def review_repository():
    return InMemoryReviewRepository()


@pytest.fixture
def notifier():
    return CollectingNotifier()


@pytest.fixture
def shipping_address():
    return dict(VALID_ADDRESS)


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(
        email='test@example.com',
        username='testuser',
        password='testpass123',
    )


@pytest.fixture
def authenticated_client(api_client, user):
    """Create an authenticated API client."""
    api_client.force_authenticate(user=user)
    return api_client
