"""
Common Value Objects

Value objects used by the booking contexts:
- TimeSlot: a time-of-day window within a single booking date
"""

from dataclasses import dataclass
from datetime import time

from shared.domain.base import ValueObject


@dataclass(frozen=True)
class TimeSlot(ValueObject):
    """
    Time slot value object

    Represents a window from start (inclusive) to end (exclusive) on a
    single calendar day. Times are naive hour:minute values.
    """
    start: time
    end: time

    def __post_init__(self):
        if self.start >= self.end:
            raise ValueError(f"Start time ({self.start}) must be before end time ({self.end})")

    def contains(self, at: time) -> bool:
        """
        Check if a time of day falls within this slot

        Note: start is inclusive, end is exclusive
        """
        return self.start <= at < self.end

    def __str__(self):
        return f"{self.start.strftime('%H:%M')} - {self.end.strftime('%H:%M')}"

    def __repr__(self):
        return f"TimeSlot({self.start}, {self.end})"
