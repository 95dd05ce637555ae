# File: meeting_finder/models/time_range.py

from dataclasses import dataclass, field

START_OF_DAY = 0
END_OF_DAY = 24 * 60 - 1  # last minute of the day
DAY_LENGTH = END_OF_DAY + 1


@dataclass(frozen=True, order=True)
class TimeRange:
    """
    Half-open span of minutes ``[start, end)`` inside a single day.

    Ranges sort by start, then by end.
    """
    start: int
    end: int
    duration: int = field(init=False, compare=False, repr=False)

    def __post_init__(self):
        """Validate bounds and derive duration."""
        if self.start < START_OF_DAY:
            raise ValueError(f"Range cannot start before midnight: {self.start}")
        if self.end > DAY_LENGTH:
            raise ValueError(f"Range cannot end after the day: {self.end}")
        if self.end < self.start:
            raise ValueError(f"Range end must not precede start: [{self.start}, {self.end})")
        object.__setattr__(self, 'duration', self.end - self.start)

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool = False) -> 'TimeRange':
        """Create a range from its bounds; ``inclusive`` keeps the end minute too."""
        return cls(start, end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> 'TimeRange':
        """Create a range of ``duration`` minutes beginning at ``start``."""
        return cls(start, start + duration)

    def contains_minute(self, minute: int) -> bool:
        """Check if a single minute falls inside this range."""
        return self.start <= minute < self.end

    def contains(self, other: 'TimeRange') -> bool:
        """Check if the other range lies entirely within this one."""
        # An empty range holds nothing, an empty other is just a point
        if self.duration <= 0:
            return False
        if other.duration <= 0:
            return self.contains_minute(other.start)
        return self.contains_minute(other.start) and self.contains_minute(other.end - 1)

    def overlaps(self, other: 'TimeRange') -> bool:
        """Check if the two ranges share at least one minute."""
        return self.contains_minute(other.start) or other.contains_minute(self.start)

    def __str__(self) -> str:
        return f"Range: [{self.start}, {self.end})"


WHOLE_DAY = TimeRange(START_OF_DAY, DAY_LENGTH)
