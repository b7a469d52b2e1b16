"""
Rating summary value object.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable

from shared.domain import ValueObject


@dataclass(frozen=True)
class RatingSummary(ValueObject):
    """Average star rating, to one decimal, and number of reviews."""
    average_rating: float = 0.0
    review_count: int = 0

    @classmethod
    def from_ratings(cls, ratings: Iterable[int]) -> 'RatingSummary':
        ratings = list(ratings)
        if not ratings:
            return cls()
        average = Decimal(sum(ratings)) / Decimal(len(ratings))
        rounded = average.quantize(Decimal('0.1'), rounding=ROUND_HALF_UP)
        return cls(average_rating=float(rounded), review_count=len(ratings))
