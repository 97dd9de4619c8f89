"""
Domain models for court calendars, slots and availability labels.
"""

from dataclasses import dataclass
from datetime import date, time
from enum import Enum
from typing import FrozenSet, Optional

from .exceptions import ConfigurationError


class Weekday(Enum):
    """Day of the week, numbered like ``date.weekday()`` (0=Monday, 6=Sunday)."""
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def of(cls, day: date) -> "Weekday":
        """Return the weekday a calendar date falls on."""
        return cls(day.weekday())


ALL_WEEKDAYS: FrozenSet[Weekday] = frozenset(Weekday)


class SlotStatus(str, Enum):
    """Status label derived for a slot at query time. Never persisted."""
    AVAILABLE = "AVAILABLE"
    BOOKED = "BOOKED"
    MAINTENANCE = "MAINTENANCE"
    CLOSED = "CLOSED"
    UNKNOWN = "UNKNOWN"


MAINTENANCE_STATUS = "MAINTENANCE"


@dataclass(frozen=True)
class OperatingWindow:
    """
    Daily [opening, closing) time-of-day range.

    Invariant: opening must be before closing.
    """
    opening: time
    closing: time

    def __post_init__(self):
        if self.opening >= self.closing:
            raise ConfigurationError(
                f"Opening time {self.opening:%H:%M} must be before closing time {self.closing:%H:%M}"
            )

    def contains(self, start: time, end: time) -> bool:
        """Check if [start, end) lies fully inside the window."""
        return self.opening <= start and end <= self.closing

    def __str__(self) -> str:
        return f"{self.opening:%H:%M} - {self.closing:%H:%M}"


@dataclass(frozen=True)
class CourtCalendar:
    """Validated operating calendar of a court."""
    day_set: FrozenSet[Weekday]
    window: OperatingWindow
    peak_window: Optional[OperatingWindow] = None


@dataclass
class CourtConfig:
    """
    Court record as maintained by court administration.

    Times and days are kept as the raw strings entered by administrators;
    they are parsed whenever the calendar is needed.
    """
    id: int
    name: str
    location: str
    status: str = "ACTIVE"
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None
    operating_days: Optional[str] = None
    peak_start_time: Optional[str] = None
    peak_end_time: Optional[str] = None

    @property
    def is_under_maintenance(self) -> bool:
        return (self.status or "").strip().upper() == MAINTENANCE_STATUS


@dataclass
class SlotCandidate:
    """A generated slot that has not been persisted yet."""
    court_id: int
    date: date
    start_time: Optional[time]
    end_time: Optional[time]
    is_available: bool = True


@dataclass
class Slot:
    """
    A persisted slot.

    ``is_available`` is False while a confirmed booking occupies the slot.
    Only the booking subsystem changes it.
    """
    id: int
    court_id: int
    date: date
    start_time: time
    end_time: time
    is_available: bool = True

    @property
    def weekday(self) -> Weekday:
        return Weekday.of(self.date)

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        start = self.start_time.hour * 60 + self.start_time.minute
        end = self.end_time.hour * 60 + self.end_time.minute
        return end - start


@dataclass
class SlotResponse:
    """A slot as reported to readers, with court display fields and its status."""
    id: int
    court_id: int
    date: date
    day_of_week: Weekday
    start_time: time
    end_time: time
    status: SlotStatus
    duration_minutes: int
    court_name: Optional[str] = None
    court_location: Optional[str] = None
