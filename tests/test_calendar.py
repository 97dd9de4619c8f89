"""
Tests for operating calendar parsing.
"""

from datetime import time

import pytest

from courtslots.domain.calendar import (
    load_court_calendar,
    parse_operating_days,
    parse_operating_window,
    parse_peak_window,
    parse_time_of_day,
)
from courtslots.domain.exceptions import ConfigurationError
from courtslots.domain.models import ALL_WEEKDAYS, CourtConfig, OperatingWindow, Weekday


class TestParseOperatingDays:
    """Tests for parse_operating_days."""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_means_every_day(self, raw):
        """Missing or blank input means the court is open all week."""
        assert parse_operating_days(raw) == ALL_WEEKDAYS
        assert len(parse_operating_days(raw)) == 7

    def test_abbreviated_and_mixed_case(self):
        """Names are matched case-insensitively and may be abbreviated."""
        assert parse_operating_days("Mon, FRI") == {Weekday.MONDAY, Weekday.FRIDAY}

    def test_full_names_with_whitespace(self):
        """Full names are trimmed before matching."""
        days = parse_operating_days(" monday ,Tuesday,  SUNDAY")

        assert days == {Weekday.MONDAY, Weekday.TUESDAY, Weekday.SUNDAY}

    def test_duplicates_collapse(self):
        """Repeated days appear once."""
        assert parse_operating_days("Monday, mon, MONDAY") == {Weekday.MONDAY}

    def test_unknown_day_raises(self):
        """An unknown day name is a configuration error."""
        with pytest.raises(ConfigurationError, match="Funday"):
            parse_operating_days("Funday")

    def test_unknown_day_among_valid_days_raises(self):
        """A single bad entry rejects the whole list."""
        with pytest.raises(ConfigurationError):
            parse_operating_days("Monday, Fryday")

    def test_list_without_any_day_raises(self):
        """Input that is not blank but names no day is rejected."""
        with pytest.raises(ConfigurationError):
            parse_operating_days(" , ")


class TestParseOperatingWindow:
    """Tests for time and window parsing."""

    def test_parse_time_of_day(self):
        assert parse_time_of_day("09:00") == time(9, 0)
        assert parse_time_of_day("9:30") == time(9, 30)
        assert parse_time_of_day("21:15:30") == time(21, 15, 30)

    @pytest.mark.parametrize("raw", ["nine", "25:00", "09:61", "0900", "", "０９:００"])
    def test_invalid_time_raises(self, raw):
        with pytest.raises(ConfigurationError):
            parse_time_of_day(raw)

    def test_valid_window(self):
        window = parse_operating_window("09:00", "21:00")

        assert window.opening == time(9, 0)
        assert window.closing == time(21, 0)

    def test_opening_after_closing_raises(self):
        """Inverted hours are rejected, never swapped."""
        with pytest.raises(ConfigurationError, match="must be before closing"):
            parse_operating_window("21:00", "09:00")

    def test_opening_equal_closing_raises(self):
        with pytest.raises(ConfigurationError):
            parse_operating_window("09:00", "09:00")

    @pytest.mark.parametrize("opening,closing", [(None, "21:00"), ("09:00", None), ("", "")])
    def test_missing_hours_raise(self, opening, closing):
        with pytest.raises(ConfigurationError, match="operating hours not defined"):
            parse_operating_window(opening, closing)

    def test_window_contains(self):
        window = OperatingWindow(opening=time(9, 0), closing=time(21, 0))

        assert window.contains(time(9, 0), time(10, 0))
        assert window.contains(time(20, 0), time(21, 0))
        assert not window.contains(time(8, 0), time(9, 0))
        assert not window.contains(time(20, 30), time(21, 30))


class TestPeakWindow:
    """Tests for peak-hour validation."""

    def setup_method(self):
        self.window = OperatingWindow(opening=time(9, 0), closing=time(21, 0))

    def test_no_peak_hours(self):
        assert parse_peak_window(None, None, self.window) is None

    def test_valid_peak_hours(self):
        peak = parse_peak_window("17:00", "21:00", self.window)

        assert peak == OperatingWindow(opening=time(17, 0), closing=time(21, 0))

    def test_half_configured_peak_raises(self):
        with pytest.raises(ConfigurationError, match="together"):
            parse_peak_window("17:00", None, self.window)

    def test_inverted_peak_raises(self):
        with pytest.raises(ConfigurationError, match="Peak start time must be before end time"):
            parse_peak_window("20:00", "18:00", self.window)

    def test_peak_outside_operating_hours_raises(self):
        with pytest.raises(ConfigurationError, match="within operating hours"):
            parse_peak_window("18:00", "22:00", self.window)


class TestLoadCourtCalendar:
    """Tests for load_court_calendar."""

    def test_complete_calendar(self):
        court = CourtConfig(
            id=1,
            name="Court 1",
            location="Hall",
            opening_time="08:00",
            closing_time="20:00",
            operating_days="Sat,Sun",
            peak_start_time="10:00",
            peak_end_time="14:00",
        )

        calendar = load_court_calendar(court)

        assert calendar.day_set == {Weekday.SATURDAY, Weekday.SUNDAY}
        assert calendar.window == OperatingWindow(opening=time(8, 0), closing=time(20, 0))
        assert calendar.peak_window == OperatingWindow(opening=time(10, 0), closing=time(14, 0))

    def test_missing_hours_raise(self):
        court = CourtConfig(id=1, name="Court 1", location="Hall")

        with pytest.raises(ConfigurationError):
            load_court_calendar(court)
