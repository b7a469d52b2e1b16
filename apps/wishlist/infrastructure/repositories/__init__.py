from .django_wishlist_repository import DjangoWishlistRepository

__all__ = ['DjangoWishlistRepository']
