from .django_review_repository import DjangoReviewRepository

__all__ = ['DjangoReviewRepository']
