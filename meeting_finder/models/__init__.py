from .time_range import TimeRange, START_OF_DAY, END_OF_DAY, DAY_LENGTH, WHOLE_DAY
from .event import Event
from .meeting_request import MeetingRequest
from .utils import time_range_from_dict, event_from_dict, meeting_request_from_dict

__all__ = [
    "TimeRange",
    "START_OF_DAY",
    "END_OF_DAY",
    "DAY_LENGTH",
    "WHOLE_DAY",
    "Event",
    "MeetingRequest",
    "time_range_from_dict",
    "event_from_dict",
    "meeting_request_from_dict",
]
