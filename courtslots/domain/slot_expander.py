"""
Expansion of a court's operating calendar into bookable slots.

Pure domain logic: no storage access and no existence checks. The same
inputs always produce the same candidates in the same order, so callers can
safely re-run generation and rely on the store to drop duplicates.
"""

from datetime import date, time
from typing import AbstractSet, List

import pendulum
from pendulum import DateTime

from .exceptions import ConfigurationError
from .models import OperatingWindow, SlotCandidate, Weekday


class SlotExpander:
    """
    Expands operating windows into fixed-length slot candidates.

    Algorithm:
    1. Walk the calendar dates in [date_from, date_to)
    2. Skip dates whose weekday the court does not operate on
    3. Cut the operating window into slots of ``slot_length_hours``
    4. Cap the last slot of the day at closing time
    """

    def __init__(self, slot_length_hours: int = 1):
        if slot_length_hours <= 0:
            raise ConfigurationError(
                f"Slot length must be a positive number of hours, got {slot_length_hours}"
            )
        self.slot_length_hours = slot_length_hours

    def expand(
        self,
        court_id: int,
        window: OperatingWindow,
        day_set: AbstractSet[Weekday],
        date_from: date,
        date_to: date,
    ) -> List[SlotCandidate]:
        """
        Generate slot candidates for every operating day in the range.

        Args:
            court_id: Court the slots belong to
            window: Daily operating window
            day_set: Weekdays the court operates on
            date_from: First date (inclusive)
            date_to: Last date (exclusive)

        Returns:
            Candidates ordered by date, then start time
        """
        candidates: List[SlotCandidate] = []

        current = pendulum.date(date_from.year, date_from.month, date_from.day)
        end = pendulum.date(date_to.year, date_to.month, date_to.day)

        while current < end:
            if Weekday.of(current) in day_set:
                candidates.extend(self._expand_day(court_id, window, current))
            current = current.add(days=1)

        return candidates

    def _expand_day(
        self,
        court_id: int,
        window: OperatingWindow,
        day: date,
    ) -> List[SlotCandidate]:
        """
        Cut one day's operating window into consecutive slots.

        Example (1 hour slots):
        Window: 09:00 - 11:30
        Result: [09:00-10:00, 10:00-11:00, 11:00-11:30]
        """
        slots: List[SlotCandidate] = []

        calendar_day = date(day.year, day.month, day.day)

        # Work on full datetimes so a window closing near midnight cannot wrap
        cursor = self._at(day, window.opening)
        closing = self._at(day, window.closing)

        while cursor < closing:
            slot_end = min(cursor.add(hours=self.slot_length_hours), closing)
            slots.append(
                SlotCandidate(
                    court_id=court_id,
                    date=calendar_day,
                    start_time=time(cursor.hour, cursor.minute, cursor.second),
                    end_time=time(slot_end.hour, slot_end.minute, slot_end.second),
                    is_available=True,
                )
            )
            cursor = slot_end

        return slots

    @staticmethod
    def _at(day: date, moment) -> DateTime:
        return pendulum.naive(
            day.year,
            day.month,
            day.day,
            moment.hour,
            moment.minute,
            moment.second,
        )
