from .rating_summary import RatingSummary

__all__ = ['RatingSummary']
