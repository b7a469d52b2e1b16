"""
Product repository interface.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.product import Product


class ProductRepository(ABC):
    """Abstract read-only repository for the catalog."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find a product by ID."""
        pass

    @abstractmethod
    def find_all(self, category: str = "all") -> List[Product]:
        """Find all products, optionally restricted to one category."""
        pass

    def find_new_arrivals(self) -> List[Product]:
        return [p for p in self.find_all() if p.is_new]

    def find_best_sellers(self) -> List[Product]:
        return [p for p in self.find_all() if p.is_best_seller]
