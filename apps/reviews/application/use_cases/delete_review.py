"""
Delete review use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from shared.domain import AuthRequiredError, PersistenceError
from shared.infrastructure.notifications import Notifier
from ...domain.exceptions import ReviewNotFoundError
from ...domain.repositories.review_repository import ReviewRepository
from ..dtos.review_dto import DeleteReviewDTO

logger = logging.getLogger(__name__)


@dataclass
class DeleteReviewUseCase(UseCase[DeleteReviewDTO, None]):
    """Delete one of the shopper's own reviews."""

    review_repository: ReviewRepository
    notifier: Notifier

    def execute(self, input_dto: DeleteReviewDTO) -> UseCaseResult[None]:
        if input_dto.user_id is None:
            self.notifier.error("Please sign in", "You need to be signed in to delete a review")
            raise AuthRequiredError("delete a review")

        review = self.review_repository.find_by_id(input_dto.review_id)
        # someone else's review looks the same as a missing one
        if review is None or not review.is_written_by(input_dto.user_id):
            raise ReviewNotFoundError(str(input_dto.review_id))

        try:
            self.review_repository.delete(review.id)
        except PersistenceError as e:
            logger.error(f"Failed to delete review {review.id}: {e.message}")
            self.notifier.error("Failed to delete review", e.message)
            raise

        self.notifier.notify("Review deleted")
        return UseCaseResult.ok(None)
