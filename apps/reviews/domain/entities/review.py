"""
Review entity.
"""
from dataclasses import dataclass, field
from typing import Any, List

from shared.domain import BaseEntity, ValidationError

MIN_RATING = 1
MAX_RATING = 5
MAX_TITLE_LENGTH = 200


@dataclass(kw_only=True)
class Review(BaseEntity):
    """A shopper's rating and comment on one product."""
    product_id: str
    user_id: Any
    rating: int
    comment: str
    title: str = ""
    images: List[str] = field(default_factory=list)
    is_verified_purchase: bool = False
    user_name: str = "Anonymous"

    @classmethod
    def write(
        cls,
        product_id: str,
        user_id: Any,
        rating: int,
        comment: str,
        title: str = "",
        images: List[str] = None,
        is_verified_purchase: bool = False,
    ) -> 'Review':
        """Create a new review from shopper input."""
        if not isinstance(rating, int) or isinstance(rating, bool) or not MIN_RATING <= rating <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}", field="rating"
            )
        comment = (comment or "").strip()
        if not comment:
            raise ValidationError("Please write a review", field="comment")
        title = (title or "").strip()
        if len(title) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Title must be at most {MAX_TITLE_LENGTH} characters", field="title"
            )
        return cls(
            product_id=product_id,
            user_id=user_id,
            rating=rating,
            comment=comment,
            title=title,
            images=list(images or []),
            is_verified_purchase=is_verified_purchase,
        )

    def is_written_by(self, user_id: Any) -> bool:
        return user_id is not None and self.user_id == user_id
