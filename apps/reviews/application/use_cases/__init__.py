from .list_reviews import ListProductReviewsUseCase
from .submit_review import SubmitReviewUseCase
from .delete_review import DeleteReviewUseCase

__all__ = ['ListProductReviewsUseCase', 'SubmitReviewUseCase', 'DeleteReviewUseCase']
