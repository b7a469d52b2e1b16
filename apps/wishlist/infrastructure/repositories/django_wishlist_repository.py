"""
Django ORM implementation of WishlistRepository.
"""
from typing import Any, List

from django.db import DatabaseError, IntegrityError, transaction

from shared.domain.exceptions import PersistenceError
from ...domain.exceptions import DuplicateWishlistItemError
from ...domain.repositories.wishlist_repository import WishlistRepository
from ..models.wishlist_model import WishlistItemModel


class DjangoWishlistRepository(WishlistRepository):
    """Django ORM based wishlist repository implementation."""

    def find_product_ids(self, user_id: Any) -> List[str]:
        try:
            return list(
                WishlistItemModel.objects.filter(user_id=user_id)
                .order_by('created_at', 'id')
                .values_list('product_id', flat=True)
            )
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="find_wishlist") from e

    def add(self, user_id: Any, product_id: str) -> None:
        try:
            with transaction.atomic():
                WishlistItemModel.objects.create(user_id=user_id, product_id=product_id)
        except IntegrityError as e:
            raise DuplicateWishlistItemError(product_id) from e
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="add_wishlist_item") from e

    def remove(self, user_id: Any, product_id: str) -> None:
        try:
            WishlistItemModel.objects.filter(user_id=user_id, product_id=product_id).delete()
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="remove_wishlist_item") from e
