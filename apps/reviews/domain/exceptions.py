"""
Review domain exceptions.
"""
from shared.domain.exceptions import EntityNotFoundError


class ReviewNotFoundError(EntityNotFoundError):
    """Raised when a review is not found."""

    def __init__(self, identifier: str):
        super().__init__(
            entity_name="Review",
            entity_id=identifier,
            code="REVIEW_NOT_FOUND",
        )
        self.identifier = identifier
