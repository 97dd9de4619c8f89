"""
Generation of slots for new or updated courts.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

import pendulum

from ..domain.calendar import load_court_calendar
from ..domain.exceptions import ConfigurationError, NotFoundError
from ..domain.models import CourtConfig, Slot
from ..domain.slot_expander import SlotExpander
from .protocols import CourtLookupProtocol
from .slot_service import SlotService

logger = logging.getLogger(__name__)


class SlotGenerationService:
    """
    Expands a court's calendar over the booking horizon and persists the slots.

    Generation is meant to run once per court lifecycle event (creation or a
    change of operating hours). Running it again is harmless when the store
    keeps one slot per court, date and start time.
    """

    def __init__(
        self,
        court_lookup: CourtLookupProtocol,
        slot_service: SlotService,
        expander: Optional[SlotExpander] = None,
        horizon_months: int = 3,
        timezone: str = "Europe/Berlin",
    ) -> None:
        if horizon_months <= 0:
            raise ConfigurationError(f"Horizon must be at least one month, got {horizon_months}")
        self._court_lookup = court_lookup
        self._slot_service = slot_service
        self._expander = expander or SlotExpander()
        self._horizon_months = horizon_months
        self._timezone = timezone

    def generate_for_court(self, court_id: int, start: Optional[date] = None) -> List[Slot]:
        """
        Generate slots for a stored court.

        Raises:
            NotFoundError: If the court does not exist
            ConfigurationError: If the court's calendar is invalid
        """
        court = self._court_lookup.find_by_id(court_id)
        if court is None:
            raise NotFoundError(f"Court not found with id: {court_id}")

        return self.generate_for_config(court, start=start)

    def generate_for_config(self, court: CourtConfig, start: Optional[date] = None) -> List[Slot]:
        """
        Generate slots for a court record the caller already holds.

        Slots cover ``[start, start + horizon)``; ``start`` defaults to today
        in the configured timezone.
        """
        calendar = load_court_calendar(court)

        first_day = start or pendulum.today(tz=self._timezone).date()
        first_day = pendulum.date(first_day.year, first_day.month, first_day.day)
        last_day = first_day.add(months=self._horizon_months)

        candidates = self._expander.expand(
            court_id=court.id,
            window=calendar.window,
            day_set=calendar.day_set,
            date_from=first_day,
            date_to=last_day,
        )
        logger.info(
            "Generated %d slot candidate(s) for court %s from %s to %s",
            len(candidates),
            court.id,
            first_day.isoformat(),
            last_day.isoformat(),
        )

        return self._slot_service.create_slots(candidates)
