"""
Order and payment status enums.
"""
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = 'pending'
    CONFIRMED = 'confirmed'
    PROCESSING = 'processing'
    SHIPPED = 'shipped'
    DELIVERED = 'delivered'
    CANCELLED = 'cancelled'

    @classmethod
    def choices(cls):
        return [(s.value, s.value.capitalize()) for s in cls]


class PaymentStatus(str, Enum):
    PENDING = 'pending'
    PAID = 'paid'
    FAILED = 'failed'

    @classmethod
    def choices(cls):
        return [(s.value, s.value.capitalize()) for s in cls]
