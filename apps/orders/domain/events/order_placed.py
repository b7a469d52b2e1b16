"""
Order placed domain event.
"""
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Event raised when a new order is placed."""
    order_id: UUID
    order_number: str
    user_id: Any
    total: int
