# Repository implementations
from .static_product_repository import StaticProductRepository

__all__ = ['StaticProductRepository']
