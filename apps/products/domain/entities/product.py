"""
Product entity.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from ..value_objects.money import Money
from ..value_objects.color_option import ColorOption
from ..exceptions import InvalidProductError

CATEGORIES = ('men', 'women', 'trending', 'sale')


@dataclass(frozen=True)
class Product:
    """Catalog product. Read-only from the storefront's point of view."""
    id: str
    name: str
    price: Money
    category: str
    subcategory: str = ""
    description: str = ""
    material: str = ""
    image: str = ""
    images: List[str] = field(default_factory=list)
    sizes: List[str] = field(default_factory=list)
    colors: List[ColorOption] = field(default_factory=list)
    original_price: Optional[Money] = None
    is_new: bool = False
    is_best_seller: bool = False
    rating: float = 0.0
    review_count: int = 0

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        """Validate product data."""
        if not self.name or len(self.name) < 2:
            raise InvalidProductError("Product name must be at least 2 characters")
        if self.price.amount < 0:
            raise InvalidProductError("Price must be non-negative")
        if self.category not in CATEGORIES:
            raise InvalidProductError(f"Unknown category '{self.category}'")

    def offers_size(self, size: str) -> bool:
        return size in self.sizes

    def offers_color(self, color: str) -> bool:
        return any(option.name == color for option in self.colors)

    @property
    def color_names(self) -> List[str]:
        return [option.name for option in self.colors]

    @property
    def is_on_sale(self) -> bool:
        """Check if the product is discounted against its original price."""
        return self.original_price is not None and self.original_price.amount > self.price.amount
