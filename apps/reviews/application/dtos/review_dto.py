"""
Review DTOs.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional
from uuid import UUID

from ...domain.entities.review import Review
from ...domain.value_objects.rating_summary import RatingSummary


@dataclass
class SubmitReviewDTO:
    """DTO for a new review."""
    product_id: str
    user_id: Optional[Any]
    rating: int
    comment: str
    title: str = ""
    images: List[str] = field(default_factory=list)


@dataclass
class DeleteReviewDTO:
    review_id: UUID
    user_id: Optional[Any]


@dataclass
class ReviewDTO:
    """DTO for review output."""
    id: UUID
    product_id: str
    user_id: Any
    user_name: str
    rating: int
    title: str
    comment: str
    images: List[str]
    is_verified_purchase: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, review: Review) -> 'ReviewDTO':
        return cls(
            id=review.id,
            product_id=review.product_id,
            user_id=review.user_id,
            user_name=review.user_name,
            rating=review.rating,
            title=review.title,
            comment=review.comment,
            images=list(review.images),
            is_verified_purchase=review.is_verified_purchase,
            created_at=review.created_at,
        )


@dataclass
class ProductReviewsDTO:
    """A product's reviews, newest first, with their rating summary."""
    product_id: str
    reviews: List[ReviewDTO]
    average_rating: float
    review_count: int

    @classmethod
    def from_reviews(cls, product_id: str, reviews: List[Review]) -> 'ProductReviewsDTO':
        summary = RatingSummary.from_ratings(r.rating for r in reviews)
        return cls(
            product_id=product_id,
            reviews=[ReviewDTO.from_entity(r) for r in reviews],
            average_rating=summary.average_rating,
            review_count=summary.review_count,
        )
