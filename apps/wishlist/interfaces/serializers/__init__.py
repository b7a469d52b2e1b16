from .wishlist_serializer import WishlistSerializer, WishlistItemSerializer

__all__ = ['WishlistSerializer', 'WishlistItemSerializer']
