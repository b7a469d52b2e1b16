"""
Color option value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidProductError

HEX_PATTERN = re.compile(r'^#[0-9A-Fa-f]{6}$')


@dataclass(frozen=True)
class ColorOption(ValueObject):
    """A named color a product is offered in."""
    name: str
    hex: str

    def __post_init__(self):
        if not self.name:
            raise InvalidProductError("Color name is required")
        if not HEX_PATTERN.match(self.hex):
            raise InvalidProductError(f"Invalid color hex '{self.hex}'")
