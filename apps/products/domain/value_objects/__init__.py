# Value objects
from .money import Money, format_price
from .color_option import ColorOption

__all__ = ['Money', 'format_price', 'ColorOption']
