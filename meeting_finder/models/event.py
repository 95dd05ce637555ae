# File: meeting_finder/models/event.py

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable
from .time_range import TimeRange


@dataclass(frozen=True)
class Event:
    """Represents a fixed calendar commitment shared by its attendees."""
    name: str
    when: TimeRange
    attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Validate event data and normalize attendees to a set."""
        if not self.name:
            raise ValueError("Event name cannot be empty")
        if not isinstance(self.when, TimeRange):
            raise TypeError(f"Event time must be a TimeRange: {self.name}")
        if isinstance(self.attendees, str):
            raise TypeError(f"Event attendees must be a collection of names, not a string: {self.name}")
        # Accept any iterable of names, duplicates collapse
        object.__setattr__(self, 'attendees', frozenset(self.attendees))

    def is_attended_by_any(self, attendees: Iterable[str]) -> bool:
        """Check if any of the given people attend this event."""
        return not self.attendees.isdisjoint(attendees)
