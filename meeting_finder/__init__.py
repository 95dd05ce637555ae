"""
Meeting Finder: free-slot search for single-day meetings.
"""

from meeting_finder.models import Event, MeetingRequest, TimeRange, WHOLE_DAY
from meeting_finder.core.availability_finder import AvailabilityFinder, find_available_slots

__version__ = "1.0.0"

__all__ = [
    "AvailabilityFinder",
    "Event",
    "MeetingRequest",
    "TimeRange",
    "WHOLE_DAY",
    "find_available_slots",
]
