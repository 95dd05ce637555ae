# File: meeting_finder/models/utils.py
"""
Factory functions that build validated models from plain dictionaries.
"""

from typing import Tuple

from .time_range import TimeRange
from .event import Event
from .meeting_request import MeetingRequest


def _names(raw) -> Tuple[str, ...]:
    """Normalize a list of attendee names; a bare string is rejected."""
    if isinstance(raw, str):
        raise TypeError(f"Attendees must be a list of names, not a string: {raw!r}")
    return tuple(str(a) for a in raw)


def time_range_from_dict(data: dict) -> TimeRange:
    """Create TimeRange from either start/end or start/duration keys."""
    start = int(data['start'])
    if 'end' in data:
        return TimeRange.from_start_end(start, int(data['end']), bool(data.get('inclusive', False)))
    return TimeRange.from_start_duration(start, int(data['duration']))


def event_from_dict(data: dict) -> Event:
    """Create Event from dictionary."""
    when = data['when']
    return Event(
        name=str(data.get('name', 'Untitled Event')),
        when=when if isinstance(when, TimeRange) else time_range_from_dict(when),
        attendees=frozenset(_names(data.get('attendees', []))),
    )


def meeting_request_from_dict(data: dict) -> MeetingRequest:
    """Create MeetingRequest from dictionary."""
    return MeetingRequest(
        attendees=_names(data.get('attendees', [])),
        duration=int(data['duration']),  # Handles "30" strings too
        optional_attendees=_names(data.get('optional_attendees', [])),
    )
