"""
Django ORM implementation of ReviewRepository.
"""
from typing import List, Optional
from uuid import UUID

from django.db import DatabaseError

from shared.domain.exceptions import PersistenceError
from ...domain.entities.review import Review
from ...domain.repositories.review_repository import ReviewRepository
from ..models.review_model import ReviewModel


class DjangoReviewRepository(ReviewRepository):
    """Django ORM based review repository implementation."""

    def find_by_product_id(self, product_id: str) -> List[Review]:
        try:
            models = (
                ReviewModel.objects.select_related('user')
                .filter(product_id=product_id)
                .order_by('-created_at')
            )
            return [self._to_entity(m) for m in models]
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="find_reviews") from e

    def find_by_id(self, review_id: UUID) -> Optional[Review]:
        try:
            model = ReviewModel.objects.select_related('user').get(id=review_id)
        except ReviewModel.DoesNotExist:
            return None
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="find_review") from e
        return self._to_entity(model)

    def save(self, review: Review) -> Review:
        try:
            model, _ = ReviewModel.objects.update_or_create(
                id=review.id,
                defaults={
                    'product_id': review.product_id,
                    'user_id': review.user_id,
                    'rating': review.rating,
                    'title': review.title,
                    'comment': review.comment,
                    'images': list(review.images),
                    'is_verified_purchase': review.is_verified_purchase,
                },
            )
            model = ReviewModel.objects.select_related('user').get(id=model.id)
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="save_review") from e
        return self._to_entity(model)

    def delete(self, review_id: UUID) -> None:
        try:
            ReviewModel.objects.filter(id=review_id).delete()
        except DatabaseError as e:
            raise PersistenceError(str(e), operation="delete_review") from e

    def _to_entity(self, model: ReviewModel) -> Review:
        return Review(
            id=model.id,
            product_id=model.product_id,
            user_id=model.user_id,
            user_name=model.user.get_full_name() or 'Anonymous',
            rating=model.rating,
            title=model.title,
            comment=model.comment,
            images=list(model.images or []),
            is_verified_purchase=model.is_verified_purchase,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
