"""
Money value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject

CURRENCY_SYMBOLS = {
    'INR': '₹',
}


def group_indian(value: int) -> str:
    """Group digits the en-IN way: 1,24,999."""
    digits = str(abs(value))
    if len(digits) <= 3:
        grouped = digits
    else:
        head, tail = digits[:-3], digits[-3:]
        pairs = []
        while len(head) > 2:
            pairs.insert(0, head[-2:])
            head = head[:-2]
        if head:
            pairs.insert(0, head)
        grouped = ",".join(pairs + [tail])
    return f"-{grouped}" if value < 0 else grouped


@dataclass(frozen=True)
class Money(ValueObject):
    """Amount in minor currency units."""
    amount: int
    currency: str = "INR"

    def __post_init__(self):
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise TypeError("Money amount must be an integer number of minor units")

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        if self.currency != other.currency:
            raise ValueError("Cannot add different currencies")
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> 'Money':
        """Multiply money by a factor."""
        return Money(amount=self.amount * factor, currency=self.currency)

    @property
    def formatted(self) -> str:
        """Get formatted money string."""
        symbol = CURRENCY_SYMBOLS.get(self.currency)
        if symbol:
            return f"{symbol}{group_indian(self.amount)}"
        return f"{self.currency} {self.amount:,}"


def format_price(amount: int, currency: str = "INR") -> str:
    return Money(amount=amount, currency=currency).formatted
