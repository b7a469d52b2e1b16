"""
Product DTOs.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from ...domain.entities.product import Product


@dataclass
class ProductDTO:
    """DTO for product output."""
    id: str
    name: str
    price: int
    price_display: str
    original_price: Optional[int]
    currency: str
    category: str
    subcategory: str
    description: str
    material: str
    image: str
    images: List[str]
    sizes: List[str]
    colors: List[Dict[str, str]]
    is_new: bool
    is_best_seller: bool
    is_on_sale: bool
    rating: float
    review_count: int

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductDTO':
        """Create DTO from entity."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price.amount,
            price_display=product.price.formatted,
            original_price=product.original_price.amount if product.original_price else None,
            currency=product.price.currency,
            category=product.category,
            subcategory=product.subcategory,
            description=product.description,
            material=product.material,
            image=product.image,
            images=list(product.images),
            sizes=list(product.sizes),
            colors=[c.to_dict() for c in product.colors],
            is_new=product.is_new,
            is_best_seller=product.is_best_seller,
            is_on_sale=product.is_on_sale,
            rating=product.rating,
            review_count=product.review_count,
        )
