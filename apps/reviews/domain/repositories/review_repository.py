"""
Review repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from ..entities.review import Review


class ReviewRepository(ABC):
    """Abstract repository for reviews. Raises PersistenceError on storage failures."""

    @abstractmethod
    def find_by_product_id(self, product_id: str) -> List[Review]:
        """Reviews of a product, newest first."""
        pass

    @abstractmethod
    def find_by_id(self, review_id: UUID) -> Optional[Review]:
        pass

    @abstractmethod
    def save(self, review: Review) -> Review:
        pass

    @abstractmethod
    def delete(self, review_id: UUID) -> None:
        pass
