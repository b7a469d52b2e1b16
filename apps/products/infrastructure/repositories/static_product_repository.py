"""
In-process implementation of ProductRepository over the static catalog.
"""
from typing import Dict, Iterable, List, Optional

from ...domain.entities.product import Product
from ...domain.repositories.product_repository import ProductRepository
from ...domain.value_objects import ColorOption, Money
from ..catalog_data import PRODUCTS


class StaticProductRepository(ProductRepository):
    """Catalog repository backed by an in-memory list of records."""

    def __init__(self, records: Optional[Iterable[dict]] = None):
        records = PRODUCTS if records is None else records
        self._products: List[Product] = [self._to_entity(r) for r in records]
        self._by_id: Dict[str, Product] = {p.id: p for p in self._products}

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find a product by ID."""
        return self._by_id.get(str(product_id))

    def find_all(self, category: str = "all") -> List[Product]:
        """Find all products, optionally restricted to one category."""
        if not category or category == "all":
            return list(self._products)
        return [p for p in self._products if p.category == category]

    def _to_entity(self, record: dict) -> Product:
        """Convert a catalog record to a domain entity."""
        original_price = record.get('original_price')
        image = record.get('image', '')
        return Product(
            id=str(record['id']),
            name=record['name'],
            price=Money(amount=record['price']),
            category=record['category'],
            subcategory=record.get('subcategory', ''),
            description=record.get('description', ''),
            material=record.get('material', ''),
            image=image,
            images=record.get('images') or ([image] * 3 if image else []),
            sizes=list(record.get('sizes', [])),
            colors=[ColorOption(name=c['name'], hex=c['hex']) for c in record.get('colors', [])],
            original_price=Money(amount=original_price) if original_price is not None else None,
            is_new=record.get('is_new', False),
            is_best_seller=record.get('is_best_seller', False),
            rating=record.get('rating', 0.0),
            review_count=record.get('review_count', 0),
        )
