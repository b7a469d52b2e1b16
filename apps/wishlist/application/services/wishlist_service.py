"""
Wishlist service.

Changes are applied to the local wishlist first and then sent to the store.
If the store rejects the change, the local wishlist is put back the way it
was before the error is raised.
"""
import logging
from typing import Any, List, Optional

from apps.products.domain.exceptions import ProductNotFoundError
from apps.products.domain.repositories.product_repository import ProductRepository
from shared.domain import AuthRequiredError, PersistenceError
from shared.infrastructure.notifications import Notifier
from ...domain.entities.wishlist import Wishlist
from ...domain.exceptions import DuplicateWishlistItemError
from ...domain.repositories.wishlist_repository import WishlistRepository

logger = logging.getLogger(__name__)


class WishlistService:
    """
    Wishlist business logic for one user session.
    """

    def __init__(
        self,
        repository: WishlistRepository,
        notifier: Notifier,
        user_id: Optional[Any] = None,
        product_repository: Optional[ProductRepository] = None,
    ):
        self.repository = repository
        self.notifier = notifier
        self.user_id = user_id
        self.product_repository = product_repository
        self.wishlist = Wishlist(user_id=user_id)

    def load(self) -> Wishlist:
        """Replace the local wishlist with the stored one."""
        if self.user_id is None:
            self.wishlist = Wishlist(user_id=None)
            return self.wishlist
        try:
            product_ids = self.repository.find_product_ids(self.user_id)
        except PersistenceError as e:
            logger.error(f"Error fetching wishlist for user {self.user_id}: {e.message}")
            raise
        self.wishlist = Wishlist(user_id=self.user_id, product_ids=list(product_ids))
        return self.wishlist

    def add(self, product_id: str) -> Wishlist:
        """Add a product to the wishlist."""
        if self.user_id is None:
            self.notifier.error(
                "Please sign in",
                "You need to be signed in to add items to your wishlist",
            )
            raise AuthRequiredError("add items to your wishlist")
        if self.product_repository is not None and self.product_repository.find_by_id(product_id) is None:
            raise ProductNotFoundError(product_id)

        added = self.wishlist.add(product_id)
        try:
            self.repository.add(self.user_id, product_id)
        except DuplicateWishlistItemError:
            # the store already has it, so the local entry is correct
            self.notifier.notify("Already in wishlist", "This item is already in your wishlist")
            return self.wishlist
        except PersistenceError as e:
            if added:
                self.wishlist.remove(product_id)
            logger.error(f"Error adding to wishlist: {e.message}")
            self.notifier.error("Error", "Failed to add item to wishlist")
            raise

        self.notifier.notify("Added to wishlist", "Item has been added to your wishlist")
        return self.wishlist

    def remove(self, product_id: str) -> Wishlist:
        """Remove a product from the wishlist. Signed-out users get a no-op."""
        if self.user_id is None:
            return self.wishlist

        position = self._position(product_id)
        removed = self.wishlist.remove(product_id)
        try:
            self.repository.remove(self.user_id, product_id)
        except PersistenceError as e:
            if removed:
                self.wishlist.product_ids.insert(position, product_id)
            logger.error(f"Error removing from wishlist: {e.message}")
            self.notifier.error("Error", "Failed to remove item from wishlist")
            raise

        self.notifier.notify("Removed from wishlist", "Item has been removed from your wishlist")
        return self.wishlist

    def contains(self, product_id: str) -> bool:
        return self.wishlist.contains(product_id)

    @property
    def product_ids(self) -> List[str]:
        return list(self.wishlist.product_ids)

    def _position(self, product_id: str) -> int:
        try:
            return self.wishlist.product_ids.index(product_id)
        except ValueError:
            return len(self.wishlist.product_ids)
