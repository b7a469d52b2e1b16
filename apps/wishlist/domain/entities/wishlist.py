"""
Wishlist entity.
"""
from dataclasses import dataclass, field
from typing import Any, List


@dataclass
class Wishlist:
    """Product ids a user has saved, in the order they were added."""
    user_id: Any
    product_ids: List[str] = field(default_factory=list)

    def add(self, product_id: str) -> bool:
        """Add a product. Returns False when it was already there."""
        if product_id in self.product_ids:
            return False
        self.product_ids.append(product_id)
        return True

    def remove(self, product_id: str) -> bool:
        """Remove a product. Returns False when it was not there."""
        if product_id not in self.product_ids:
            return False
        self.product_ids.remove(product_id)
        return True

    def contains(self, product_id: str) -> bool:
        return product_id in self.product_ids

    def __len__(self) -> int:
        return len(self.product_ids)
