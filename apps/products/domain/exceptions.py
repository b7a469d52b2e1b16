"""
Product domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError, ValidationError


class InvalidProductError(ValidationError):
    """Raised when product data is invalid."""

    def __init__(self, message: str):
        super().__init__(message=message, field="product")


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, identifier: str):
        super().__init__(
            entity_name="Product",
            entity_id=identifier,
            code="PRODUCT_NOT_FOUND",
        )
        self.identifier = identifier


__all__ = [
    'InvalidProductError',
    'ProductNotFoundError',
]
