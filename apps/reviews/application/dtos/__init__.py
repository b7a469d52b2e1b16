from .review_dto import SubmitReviewDTO, DeleteReviewDTO, ReviewDTO, ProductReviewsDTO

__all__ = ['SubmitReviewDTO', 'DeleteReviewDTO', 'ReviewDTO', 'ProductReviewsDTO']
