from .review_serializer import ReviewSerializer, ProductReviewsSerializer, SubmitReviewSerializer

__all__ = ['ReviewSerializer', 'ProductReviewsSerializer', 'SubmitReviewSerializer']
