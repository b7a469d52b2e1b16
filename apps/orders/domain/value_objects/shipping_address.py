"""
Shipping address value object.
"""
from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from shared.domain import ValueObject, ValidationError

# field -> (min length, max length, message when too short)
FIELD_RULES = {
    'name': (2, 100, "Name is required"),
    'address': (5, 200, "Address is required"),
    'city': (2, 100, "City is required"),
    'postal_code': (4, 20, "Postal code is required"),
    'country': (2, 100, "Country is required"),
    'phone': (10, 20, "Valid phone number required"),
}


@dataclass(frozen=True)
class ShippingAddress(ValueObject):
    """Where an order is delivered."""
    name: str
    address: str
    city: str
    postal_code: str
    country: str
    phone: str

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                raise ValidationError(f"{f.name} must be a string", field=f.name)
            stripped = value.strip()
            object.__setattr__(self, f.name, stripped)
            min_length, max_length, message = FIELD_RULES[f.name]
            if len(stripped) < min_length:
                raise ValidationError(message, field=f.name)
            if len(stripped) > max_length:
                raise ValidationError(
                    f"{f.name} must be at most {max_length} characters", field=f.name
                )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ShippingAddress':
        """Build from user input; a missing field fails like an empty one."""
        if not isinstance(data, dict):
            raise ValidationError("Shipping address is required", field="shipping_address")
        return cls(**{name: data.get(name, "") for name in FIELD_RULES})

    @classmethod
    def from_stored(cls, data: Optional[Dict[str, Any]]) -> 'ShippingAddress':
        """Rebuild an address saved with an order, exactly as it was stored."""
        data = data or {}
        address = cls.__new__(cls)
        for name in FIELD_RULES:
            object.__setattr__(address, name, str(data.get(name) or ""))
        return address

    @property
    def lines(self):
        return [
            self.name,
            self.address,
            f"{self.city}, {self.postal_code}",
            self.country,
            self.phone,
        ]
