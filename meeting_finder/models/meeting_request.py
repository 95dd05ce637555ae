# File: meeting_finder/models/meeting_request.py

from dataclasses import dataclass, replace
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class MeetingRequest:
    """
    A request for a meeting slot.

    Required attendees must all be free. Optional attendees are
    considered together and dropped as a group when they make the
    meeting impossible.
    """
    attendees: Tuple[str, ...]
    duration: int
    optional_attendees: Tuple[str, ...] = ()

    def __post_init__(self):
        """Validate duration and freeze attendee lists."""
        if self.duration < 0:
            raise ValueError(f"Meeting duration cannot be negative: {self.duration}")
        for attendees in (self.attendees, self.optional_attendees):
            if isinstance(attendees, str):
                raise TypeError(f"Attendees must be a collection of names, not a string: {attendees!r}")
        object.__setattr__(self, 'attendees', tuple(self.attendees))
        object.__setattr__(self, 'optional_attendees', tuple(self.optional_attendees))

    def all_attendees(self) -> FrozenSet[str]:
        """Everyone invited, treating optional attendees as required."""
        return frozenset(self.attendees) | frozenset(self.optional_attendees)

    def required_only(self) -> 'MeetingRequest':
        """Copy of this request without optional attendees."""
        return replace(self, optional_attendees=())

    def with_optional_attendee(self, attendee: str) -> 'MeetingRequest':
        """Copy of this request with one more optional attendee."""
        return replace(self, optional_attendees=self.optional_attendees + (attendee,))
