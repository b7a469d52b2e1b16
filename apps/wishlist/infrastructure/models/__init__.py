from .wishlist_model import WishlistItemModel

__all__ = ['WishlistItemModel']
