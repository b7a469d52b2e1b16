"""
Order repository interface.
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional
from uuid import UUID

from ..entities.order import Order


class OrderRepository(ABC):
    """
    Abstract repository for Order aggregate.

    save() writes the order header and its items as one unit: either both
    are stored or neither is. An order is unique per cart_id; saving a
    second order for the same cart raises CartAlreadyOrderedError. Other
    storage failures raise PersistenceError.
    """

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Save an order with its items."""
        pass

    @abstractmethod
    def find_by_id(self, order_id: UUID) -> Optional[Order]:
        """Find an order by ID."""
        pass

    @abstractmethod
    def find_by_user_id(self, user_id: Any) -> List[Order]:
        """Find orders by user ID, newest first."""
        pass
