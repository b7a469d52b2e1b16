"""
Order number value object.
"""
import random
import re
import string
from dataclasses import dataclass
from datetime import datetime

from shared.domain import ValueObject, ValidationError

ORDER_NUMBER_PATTERN = re.compile(r'^ORD-\d{8}-[A-Z0-9]{6}$')


@dataclass(frozen=True)
class OrderNumber(ValueObject):
    """Human-facing order reference, e.g. ORD-20260101-7KQ2ZB."""
    value: str

    def __post_init__(self):
        if not ORDER_NUMBER_PATTERN.match(self.value):
            raise ValidationError(f"Invalid order number '{self.value}'", field="order_number")

    @classmethod
    def generate(cls, now: datetime = None) -> 'OrderNumber':
        """Generate a new order number."""
        date_part = (now or datetime.now()).strftime("%Y%m%d")
        random_part = ''.join(random.choices(string.ascii_uppercase + string.digits, k=6))
        return cls(value=f"ORD-{date_part}-{random_part}")

    def __str__(self) -> str:
        return self.value
