"""
Application services for reading and creating court slots.

The service fans reads out to the slot store, resolves the courts the slots
belong to in one batch and delegates status resolution to the domain-level
``AvailabilityClassifier``. Storage and court lookup are injected through
simple protocols so tests can use stubs.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Dict, Iterable, List, Optional, Sequence

import pendulum

from ..domain.availability import AvailabilityClassifier
from ..domain.calendar import parse_operating_days, parse_operating_window
from ..domain.exceptions import ConfigurationError, NotFoundError, ValidationError
from ..domain.models import CourtConfig, Slot, SlotCandidate, SlotResponse, SlotStatus
from .protocols import CourtLookupProtocol, SlotStoreProtocol

logger = logging.getLogger(__name__)


class SlotService:
    """
    Orchestrates slot persistence, court resolution and classification.
    """

    def __init__(
        self,
        slot_store: SlotStoreProtocol,
        court_lookup: CourtLookupProtocol,
        classifier: Optional[AvailabilityClassifier] = None,
        timezone: str = "Europe/Berlin",
    ) -> None:
        self._slot_store = slot_store
        self._court_lookup = court_lookup
        self._classifier = classifier or AvailabilityClassifier()
        self._timezone = timezone

    def query_slots(
        self,
        court_ids: Optional[Iterable[int]],
        date_from: date,
        date_to: date,
    ) -> List[SlotResponse]:
        """
        Return the slots of the given courts (all courts when empty) between
        ``date_from`` and ``date_to`` inclusive, each with its current status.
        """
        requested = list(dict.fromkeys(court_ids or []))

        if not requested:
            slots = self._slot_store.find_by_date_range(date_from, date_to)
        else:
            slots = []
            for court_id in requested:
                slots.extend(
                    self._slot_store.find_by_court_and_date_range(court_id, date_from, date_to)
                )

        if not slots:
            return []

        courts = self._resolve_courts(slots)

        return [self._to_response(slot, courts.get(slot.court_id)) for slot in slots]

    def create_slots(self, candidates: Sequence[SlotCandidate]) -> List[Slot]:
        """
        Persist a batch of slot candidates.

        The whole batch is validated before anything is written, so a single
        invalid candidate rejects the batch.

        Raises:
            ValidationError: If a candidate has no start or end time
        """
        for candidate in candidates:
            if candidate.start_time is None:
                raise ValidationError(
                    f"Start time is required for slot creation (court {candidate.court_id}, {candidate.date})"
                )
            if candidate.end_time is None:
                raise ValidationError(
                    f"End time is required for slot creation (court {candidate.court_id}, {candidate.date})"
                )

        if not candidates:
            return []

        saved = self._slot_store.save_all(list(candidates))
        logger.info("Persisted %d slot(s)", len(saved))
        return saved

    def available_slots_for_court(
        self,
        court_id: int,
        today: Optional[date] = None,
        days: int = 7,
    ) -> List[SlotResponse]:
        """
        Return the unbooked slots of one court from ``today`` through the
        next ``days`` days.

        Raises:
            NotFoundError: If the court does not exist
        """
        court = self._court_lookup.find_by_id(court_id)
        if court is None:
            raise NotFoundError(f"Court not found with id: {court_id}")

        start = today or pendulum.today(tz=self._timezone).date()
        end = start + timedelta(days=days)

        slots = self._slot_store.find_by_court_and_date_range(court_id, start, end)

        return [self._to_response(slot, court) for slot in slots if slot.is_available]

    def _resolve_courts(self, slots: Sequence[Slot]) -> Dict[int, CourtConfig]:
        """Look up every court referenced by ``slots`` in a single call."""
        court_ids = {slot.court_id for slot in slots}
        courts = self._court_lookup.find_all_by_ids(court_ids)

        missing = court_ids - set(courts)
        if missing:
            logger.warning(
                "Slots reference unknown court(s) %s, reporting them as unknown",
                sorted(missing),
            )

        for court in courts.values():
            try:
                parse_operating_days(court.operating_days)
                parse_operating_window(court.opening_time, court.closing_time)
            except ConfigurationError as exc:
                logger.warning(
                    "Court %s has an invalid calendar, its slots are reported as unknown: %s",
                    court.id,
                    exc,
                )

        return courts

    def _to_response(self, slot: Slot, court: Optional[CourtConfig]) -> SlotResponse:
        response = SlotResponse(
            id=slot.id,
            court_id=slot.court_id,
            date=slot.date,
            day_of_week=slot.weekday,
            start_time=slot.start_time,
            end_time=slot.end_time,
            status=SlotStatus.UNKNOWN,
            duration_minutes=slot.duration_minutes(),
        )

        if court is not None:
            response.court_name = court.name
            response.court_location = court.location
            response.status = self._classifier.classify(slot, court)

        return response
