"""
Wishlist repository interface.
"""
from abc import ABC, abstractmethod
from typing import Any, List


class WishlistRepository(ABC):
    """Abstract store of saved products per user."""

    @abstractmethod
    def find_product_ids(self, user_id: Any) -> List[str]:
        """Product ids saved by the user, oldest first."""
        pass

    @abstractmethod
    def add(self, user_id: Any, product_id: str) -> None:
        """Save a product. Raises DuplicateWishlistItemError if already saved."""
        pass

    @abstractmethod
    def remove(self, user_id: Any, product_id: str) -> None:
        """Delete a saved product."""
        pass
