"""
Parsing of court operating calendars.

Administrators enter operating days as a comma-separated list of weekday
names and operating hours as ``HH:MM`` strings. These helpers turn that
free-form input into validated domain values and fail fast on anything
they cannot interpret. They are pure functions and keep no state between
calls.
"""

from datetime import time
from typing import Dict, FrozenSet, Optional

import pendulum

from .exceptions import ConfigurationError
from .models import ALL_WEEKDAYS, CourtCalendar, CourtConfig, OperatingWindow, Weekday


def _weekday_names() -> Dict[str, Weekday]:
    names: Dict[str, Weekday] = {}
    for day in Weekday:
        names[day.name] = day
        names[day.name[:3]] = day
    return names


_WEEKDAY_NAMES = _weekday_names()


def parse_operating_days(raw: Optional[str]) -> FrozenSet[Weekday]:
    """
    Parse a comma-separated list of weekday names.

    Blank or missing input means the court operates every day. Names are
    matched case-insensitively, either in full ("Monday") or abbreviated
    to three letters ("Mon").

    Raises:
        ConfigurationError: If any entry is not a weekday name
    """
    if raw is None or not raw.strip():
        return ALL_WEEKDAYS

    days = set()
    for token in raw.split(","):
        name = token.strip().upper()
        if name not in _WEEKDAY_NAMES:
            raise ConfigurationError(f"Invalid day in operating days: '{token.strip()}'")
        days.add(_WEEKDAY_NAMES[name])

    return frozenset(days)


def parse_time_of_day(raw: Optional[str]) -> time:
    """
    Parse an ``HH:MM`` (or ``HH:MM:SS``) time of day.

    Raises:
        ConfigurationError: If the value is missing or not a valid time
    """
    if raw is None:
        raise ConfigurationError("Time of day is required")

    value = raw.strip()
    if not value.isascii():
        raise ConfigurationError(f"Invalid time format: '{raw}' (expected HH:MM)")

    fmt = "H:mm:ss" if value.count(":") == 2 else "H:mm"
    try:
        parsed = pendulum.from_format(value, fmt)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid time format: '{raw}' (expected HH:MM)") from exc

    return time(parsed.hour, parsed.minute, parsed.second)


def parse_operating_window(opening_raw: Optional[str], closing_raw: Optional[str]) -> OperatingWindow:
    """
    Parse opening and closing times into an operating window.

    Raises:
        ConfigurationError: If either time is missing or unparsable, or
            the court would close before it opens
    """
    if not opening_raw or not closing_raw:
        raise ConfigurationError("Court operating hours not defined")

    return OperatingWindow(
        opening=parse_time_of_day(opening_raw),
        closing=parse_time_of_day(closing_raw),
    )


def parse_peak_window(
    peak_start_raw: Optional[str],
    peak_end_raw: Optional[str],
    window: OperatingWindow,
) -> Optional[OperatingWindow]:
    """
    Parse the optional peak-hour window of a court.

    Returns None when no peak hours are configured. Peak hours must be
    given as a pair and must lie within the operating window.
    """
    if not peak_start_raw and not peak_end_raw:
        return None

    if not peak_start_raw or not peak_end_raw:
        raise ConfigurationError("Peak start and end time must be configured together")

    start = parse_time_of_day(peak_start_raw)
    end = parse_time_of_day(peak_end_raw)
    if start >= end:
        raise ConfigurationError("Peak start time must be before end time")

    peak = OperatingWindow(opening=start, closing=end)
    if not window.contains(peak.opening, peak.closing):
        raise ConfigurationError(
            f"Peak hours {peak} must be within operating hours {window}"
        )

    return peak


def load_court_calendar(court: CourtConfig) -> CourtCalendar:
    """Parse and validate the complete operating calendar of a court."""
    window = parse_operating_window(court.opening_time, court.closing_time)

    return CourtCalendar(
        day_set=parse_operating_days(court.operating_days),
        window=window,
        peak_window=parse_peak_window(court.peak_start_time, court.peak_end_time, window),
    )
