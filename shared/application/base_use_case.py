"""
Base use case classes.

Use cases raise domain exceptions on failure; a result is only built for the
success path and carries the domain events the caller may react to.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from shared.domain.domain_event import DomainEvent

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass
class UseCaseResult(Generic[OutputDTO]):
    """Output of a successful use case run."""
    data: Optional[OutputDTO] = None
    events: List[DomainEvent] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return True

    @classmethod
    def ok(cls, data: OutputDTO, events: List[DomainEvent] = None) -> 'UseCaseResult[OutputDTO]':
        return cls(data=data, events=list(events or []))

    def events_of(self, event_type: type) -> List[DomainEvent]:
        """Recorded events of one type, in the order they happened."""
        return [e for e in self.events if isinstance(e, event_type)]


class UseCase(ABC, Generic[InputDTO, OutputDTO]):
    """Base use case class."""

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        """Execute the use case."""
        pass
