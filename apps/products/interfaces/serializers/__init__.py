# Serializers
from .product_serializer import ProductSerializer, ColorOptionSerializer

__all__ = ['ProductSerializer', 'ColorOptionSerializer']
