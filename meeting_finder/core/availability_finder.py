# File: meeting_finder/core/availability_finder.py
"""
Availability finder.
Computes the free intervals of a single day in which everyone invited to a
meeting can attend, given the existing events on their calendars.
"""

from typing import AbstractSet, Iterable, List

from meeting_finder.models import Event, MeetingRequest, TimeRange, START_OF_DAY, DAY_LENGTH
from meeting_finder.utils.logger import LoggerMixin


class AvailabilityFinder(LoggerMixin):
    """
    Finds meeting slots for a request against a snapshot of events.

    The finder keeps no state between calls. Callers must not mutate the
    event collection while a query is running.
    """

    def find_available_slots(self, events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
        """
        Return the free ranges, in start order, that fit the requested duration.

        Optional attendees are first treated as required. If that leaves no
        slot and there is at least one required attendee, the query is run
        again with the required attendees only.

        Args:
            events: Existing events, in any order
            request: Attendees and duration of the meeting

        Returns:
            Non-overlapping ranges, each at least ``request.duration`` long
        """
        if request.duration > DAY_LENGTH:
            self.logger.debug(f"Requested {request.duration} min, longer than a day")
            return []

        events = list(events)
        slots = self._find_for_attendees(events, request.all_attendees(), request.duration)
        if slots or not request.attendees:
            return slots

        self.logger.debug(
            f"No slot fits all {len(request.all_attendees())} attendees, "
            f"retrying with {len(request.attendees)} required only"
        )
        required = request.required_only()
        return self._find_for_attendees(events, required.all_attendees(), required.duration)

    def _find_for_attendees(self, events: List[Event], attendees: AbstractSet[str], duration: int) -> List[TimeRange]:
        busy = merge_busy_ranges(collect_busy_ranges(events, attendees))
        free = derive_free_ranges(busy, duration)
        self.logger.debug(
            f"Attendees {sorted(attendees)}: {len(busy)} busy runs, {len(free)} free ranges"
        )
        return free


def collect_busy_ranges(events: Iterable[Event], attendees: AbstractSet[str]) -> List[TimeRange]:
    """Time ranges of the events that involve at least one of the attendees."""
    return [event.when for event in events if event.is_attended_by_any(attendees)]


def merge_busy_ranges(ranges: Iterable[TimeRange]) -> List[TimeRange]:
    """
    Sort busy ranges and fold overlapping ones into single runs.

    Back-to-back ranges stay separate so the zero-width gap between them
    is still reported for zero-length meetings.
    """
    merged: List[TimeRange] = []
    for current in sorted(ranges):
        if merged and current.start < merged[-1].end:
            if current.end > merged[-1].end:
                merged[-1] = TimeRange(merged[-1].start, current.end)
            continue
        merged.append(current)
    return merged


def derive_free_ranges(busy: List[TimeRange], duration: int) -> List[TimeRange]:
    """
    Invert sorted, disjoint busy runs within the day.

    Only gaps of at least ``duration`` minutes are kept.
    """
    if not busy:
        return [TimeRange(START_OF_DAY, DAY_LENGTH)]

    free: List[TimeRange] = []
    if busy[0].start > START_OF_DAY:
        free.append(TimeRange(START_OF_DAY, busy[0].start))

    for previous, following in zip(busy, busy[1:]):
        free.append(TimeRange(previous.end, following.start))

    if busy[-1].end < DAY_LENGTH:
        free.append(TimeRange(busy[-1].end, DAY_LENGTH))

    return [slot for slot in free if slot.duration >= duration]


def find_available_slots(events: Iterable[Event], request: MeetingRequest) -> List[TimeRange]:
    """Module-level shortcut for AvailabilityFinder().find_available_slots."""
    return AvailabilityFinder().find_available_slots(events, request)
