"""
Base value object class for DDD.
"""
from abc import ABC
from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base value object class.
    Value objects are immutable and compared by their attributes.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict representation, used for session and JSON storage."""
        return asdict(self)
