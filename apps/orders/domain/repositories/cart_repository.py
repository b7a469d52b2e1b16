"""
Cart repository interface.
"""
from abc import ABC, abstractmethod

from ..entities.cart import Cart


class CartRepository(ABC):
    """Abstract repository for the session-owned Cart aggregate."""

    @abstractmethod
    def load(self) -> Cart:
        """Return the current session's cart, creating an empty one if needed."""
        pass

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        """Save a cart."""
        pass

    @abstractmethod
    def delete(self) -> None:
        """Drop the session's cart."""
        pass
