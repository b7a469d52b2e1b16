# Domain entities
from .product import Product, CATEGORIES

__all__ = ['Product', 'CATEGORIES']
