"""
Domain layer - Pure scheduling logic without storage or I/O.
"""

from .availability import AvailabilityClassifier
from .calendar import (
    load_court_calendar,
    parse_operating_days,
    parse_operating_window,
    parse_peak_window,
    parse_time_of_day,
)
from .exceptions import ConfigurationError, CourtSlotsError, NotFoundError, ValidationError
from .models import (
    ALL_WEEKDAYS,
    CourtCalendar,
    CourtConfig,
    OperatingWindow,
    Slot,
    SlotCandidate,
    SlotResponse,
    SlotStatus,
    Weekday,
)
from .slot_expander import SlotExpander

__all__ = [
    "ALL_WEEKDAYS",
    "AvailabilityClassifier",
    "ConfigurationError",
    "CourtCalendar",
    "CourtConfig",
    "CourtSlotsError",
    "NotFoundError",
    "OperatingWindow",
    "Slot",
    "SlotCandidate",
    "SlotExpander",
    "SlotResponse",
    "SlotStatus",
    "ValidationError",
    "Weekday",
    "load_court_calendar",
    "parse_operating_days",
    "parse_operating_window",
    "parse_peak_window",
    "parse_time_of_day",
]
