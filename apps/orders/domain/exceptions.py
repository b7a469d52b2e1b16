"""
Order domain exceptions.
"""
from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InvalidOperationError,
    ValidationError,
)


class OrderNotFoundError(EntityNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, identifier: str):
        super().__init__(
            entity_name="Order",
            entity_id=identifier,
            code="ORDER_NOT_FOUND",
        )
        self.identifier = identifier


class EmptyCartError(DomainException):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Cannot checkout an empty cart",
            code="EMPTY_CART"
        )


class InvalidQuantityError(ValidationError):
    """Raised when a cart quantity is not a positive integer."""

    def __init__(self, quantity):
        super().__init__(
            message=f"Quantity must be a positive integer, got {quantity!r}",
            field="quantity",
            code="INVALID_QUANTITY",
        )
        self.quantity = quantity


class CheckoutInProgressError(InvalidOperationError):
    """Raised when an order submission is already running for the user."""

    def __init__(self):
        super().__init__(
            message="An order is already being placed, please wait",
            operation="place_order",
            state="in_progress",
            code="CHECKOUT_IN_PROGRESS",
        )


class CartAlreadyOrderedError(InvalidOperationError):
    """Raised when a cart that already became an order is submitted again."""

    def __init__(self, cart_id):
        super().__init__(
            message="This cart has already been ordered",
            operation="place_order",
            state="ordered",
            code="CART_ALREADY_ORDERED",
        )
        self.cart_id = cart_id
