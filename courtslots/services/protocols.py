"""
Protocols describing the storage and lookup collaborators of the services.
"""

from __future__ import annotations

from datetime import date
from typing import Dict, Iterable, List, Optional, Protocol, Sequence

from ..domain.models import CourtConfig, Slot, SlotCandidate


class CourtLookupProtocol(Protocol):
    """Resolves court records by id."""

    def find_by_id(self, court_id: int) -> Optional[CourtConfig]:
        """Return the court or None if it does not exist."""

    def find_all_by_ids(self, court_ids: Iterable[int]) -> Dict[int, CourtConfig]:
        """Return the courts that exist among ``court_ids``, keyed by id."""


class SlotStoreProtocol(Protocol):
    """
    Persistence boundary for slots.

    Date ranges are inclusive at both ends. Implementations are expected to
    keep at most one slot per (court, date, start time).
    """

    def save(self, candidate: SlotCandidate) -> Slot:
        """Persist one candidate and return the stored slot."""

    def save_all(self, candidates: Sequence[SlotCandidate]) -> List[Slot]:
        """Persist candidates in order and return the stored slots."""

    def find_by_date_range(self, date_from: date, date_to: date) -> List[Slot]:
        """Return all slots dated within the range."""

    def find_by_court_and_date_range(
        self,
        court_id: int,
        date_from: date,
        date_to: date,
    ) -> List[Slot]:
        """Return one court's slots dated within the range."""
