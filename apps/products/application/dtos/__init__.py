from .product_dto import ProductDTO

__all__ = ['ProductDTO']
