"""
Submit review use case.
"""
import logging
from dataclasses import dataclass
from typing import Any, Optional

from apps.orders.domain.repositories.order_repository import OrderRepository
from apps.products.domain.exceptions import ProductNotFoundError
from apps.products.domain.repositories.product_repository import ProductRepository
from shared.application import UseCase, UseCaseResult
from shared.domain import AuthRequiredError, PersistenceError, ValidationError
from shared.infrastructure.notifications import Notifier
from ...domain.entities.review import Review
from ...domain.repositories.review_repository import ReviewRepository
from ..dtos.review_dto import ReviewDTO, SubmitReviewDTO

logger = logging.getLogger(__name__)


@dataclass
class SubmitReviewUseCase(UseCase[SubmitReviewDTO, ReviewDTO]):
    """
    Store a signed-in shopper's review of a product.

    The review is marked as a verified purchase when one of the shopper's
    orders contains the product.
    """

    review_repository: ReviewRepository
    product_repository: ProductRepository
    notifier: Notifier
    order_repository: Optional[OrderRepository] = None

    def execute(self, input_dto: SubmitReviewDTO) -> UseCaseResult[ReviewDTO]:
        if input_dto.user_id is None:
            self.notifier.error("Please sign in", "You need to be signed in to leave a review")
            raise AuthRequiredError("leave a review")

        if self.product_repository.find_by_id(input_dto.product_id) is None:
            raise ProductNotFoundError(input_dto.product_id)

        try:
            review = Review.write(
                product_id=input_dto.product_id,
                user_id=input_dto.user_id,
                rating=input_dto.rating,
                comment=input_dto.comment,
                title=input_dto.title,
                images=input_dto.images,
                is_verified_purchase=self._has_bought(input_dto.user_id, input_dto.product_id),
            )
        except ValidationError as e:
            self.notifier.error("Failed to submit review", e.message)
            raise

        try:
            saved = self.review_repository.save(review)
        except PersistenceError as e:
            logger.error(f"Failed to save review of {input_dto.product_id}: {e.message}")
            self.notifier.error("Failed to submit review", e.message)
            raise

        logger.info(f"Review {saved.id} of {saved.product_id} by user {saved.user_id}")
        self.notifier.notify("Review submitted", "Thank you for your feedback!")
        return UseCaseResult.ok(ReviewDTO.from_entity(saved))

    def _has_bought(self, user_id: Any, product_id: str) -> bool:
        if self.order_repository is None:
            return False
        return any(
            item.product_id == product_id
            for order in self.order_repository.find_by_user_id(user_id)
            for item in order.items
        )
