"""
Wishlist domain exceptions.
"""
from shared.domain.exceptions import DomainException


class DuplicateWishlistItemError(DomainException):
    """Raised by the store when the product is already saved."""

    def __init__(self, product_id: str):
        super().__init__(
            message=f"Product '{product_id}' is already in the wishlist",
            code="DUPLICATE_WISHLIST_ITEM",
        )
        self.product_id = product_id
