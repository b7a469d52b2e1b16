from .review_model import ReviewModel

__all__ = ['ReviewModel']
