"""
Availability classification of persisted slots.

The status of a slot is never stored. It is recomputed on every read from
the slot's occupancy flag and the court's current configuration, so a
change to a court's hours or days reclassifies existing slots immediately.
"""

import logging
from typing import Optional

from .calendar import parse_operating_days, parse_operating_window
from .exceptions import ConfigurationError
from .models import CourtConfig, Slot, SlotStatus

logger = logging.getLogger(__name__)


class AvailabilityClassifier:
    """
    Resolves a single status label for a slot.

    Rules are checked in order and the first match wins:
    1. Slot occupied by a booking        -> BOOKED
    2. Court under maintenance           -> MAINTENANCE
    3. Slot outside the operating days   -> CLOSED
    4. Slot outside the operating hours  -> CLOSED
    5. Otherwise                         -> AVAILABLE

    A slot whose court is missing or whose court calendar cannot be parsed
    is UNKNOWN and none of the rules above are evaluated.
    """

    def classify(self, slot: Slot, court: Optional[CourtConfig]) -> SlotStatus:
        if court is None:
            return SlotStatus.UNKNOWN

        try:
            day_set = parse_operating_days(court.operating_days)
            window = parse_operating_window(court.opening_time, court.closing_time)
        except ConfigurationError as exc:
            logger.debug(
                "Court %s has an invalid calendar, slot %s reported as unknown: %s",
                court.id,
                slot.id,
                exc,
            )
            return SlotStatus.UNKNOWN

        if not slot.is_available:
            return SlotStatus.BOOKED

        if court.is_under_maintenance:
            return SlotStatus.MAINTENANCE

        if slot.weekday not in day_set:
            return SlotStatus.CLOSED

        if not window.contains(slot.start_time, slot.end_time):
            return SlotStatus.CLOSED

        return SlotStatus.AVAILABLE
