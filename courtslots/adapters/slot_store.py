"""
Reference slot stores: an in-memory store and a JSON-file-backed variant.
"""

import json
import logging
from datetime import date, time
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

from ..domain.exceptions import NotFoundError
from ..domain.models import Slot, SlotCandidate

logger = logging.getLogger(__name__)

SlotKey = Tuple[int, str, str]


def _slot_key(court_id: int, day: date, start: time) -> SlotKey:
    return court_id, day.isoformat(), start.isoformat()


class InMemorySlotStore:
    """
    Slot store kept in process memory.

    Slots get sequential ids. At most one slot is kept per court, date and
    start time; saving a duplicate returns the slot already stored.
    """

    def __init__(self):
        self._slots: Dict[int, Slot] = {}
        self._keys: Dict[SlotKey, int] = {}
        self._next_id = 1

    def save(self, candidate: SlotCandidate) -> Slot:
        key = _slot_key(candidate.court_id, candidate.date, candidate.start_time)
        if key in self._keys:
            existing = self._slots[self._keys[key]]
            logger.debug(
                "Slot for court %s on %s at %s already exists (id %s)",
                candidate.court_id,
                candidate.date,
                candidate.start_time,
                existing.id,
            )
            return existing

        slot = Slot(
            id=self._next_id,
            court_id=candidate.court_id,
            date=candidate.date,
            start_time=candidate.start_time,
            end_time=candidate.end_time,
            is_available=candidate.is_available,
        )
        self._slots[slot.id] = slot
        self._keys[key] = slot.id
        self._next_id += 1
        return slot

    def save_all(self, candidates: Sequence[SlotCandidate]) -> List[Slot]:
        return [self.save(candidate) for candidate in candidates]

    def find_by_date_range(self, date_from: date, date_to: date) -> List[Slot]:
        return self._sorted(
            slot for slot in self._slots.values()
            if date_from <= slot.date <= date_to
        )

    def find_by_court_and_date_range(
        self,
        court_id: int,
        date_from: date,
        date_to: date,
    ) -> List[Slot]:
        return self._sorted(
            slot for slot in self._slots.values()
            if slot.court_id == court_id and date_from <= slot.date <= date_to
        )

    def get(self, slot_id: int) -> Slot:
        """
        Return a slot by id.

        Raises:
            NotFoundError: If no slot has this id
        """
        if slot_id not in self._slots:
            raise NotFoundError(f"Slot not found with id: {slot_id}")
        return self._slots[slot_id]

    def mark_booked(self, slot_id: int) -> Slot:
        """Occupy a slot, as the booking subsystem does on a confirmed booking."""
        slot = self.get(slot_id)
        slot.is_available = False
        return slot

    def release(self, slot_id: int) -> Slot:
        """Free a slot again, as the booking subsystem does on cancellation."""
        slot = self.get(slot_id)
        slot.is_available = True
        return slot

    def __len__(self) -> int:
        return len(self._slots)

    @staticmethod
    def _sorted(slots) -> List[Slot]:
        return sorted(slots, key=lambda s: (s.date, s.start_time, s.court_id))


class JsonFileSlotStore(InMemorySlotStore):
    """
    In-memory slot store persisted to a JSON file.

    The file is read on construction and rewritten after every change. Writes
    go to a sibling ``.tmp`` file that then replaces the store file, so a
    failed write leaves the previous contents in place.
    """

    def __init__(self, path: Path):
        super().__init__()
        self.path = Path(path)
        self._load()

    def save_all(self, candidates: Sequence[SlotCandidate]) -> List[Slot]:
        slots = [InMemorySlotStore.save(self, candidate) for candidate in candidates]
        self._flush()
        return slots

    def save(self, candidate: SlotCandidate) -> Slot:
        slot = super().save(candidate)
        self._flush()
        return slot

    def mark_booked(self, slot_id: int) -> Slot:
        slot = super().mark_booked(slot_id)
        self._flush()
        return slot

    def release(self, slot_id: int) -> Slot:
        slot = super().release(slot_id)
        self._flush()
        return slot

    def _load(self) -> None:
        """Load slots from the JSON file if it exists."""
        if not self.path.exists():
            return

        with open(self.path, "r", encoding="utf-8") as f:
            records = json.load(f)

        for record in records:
            slot = Slot(
                id=record["id"],
                court_id=record["court_id"],
                date=date.fromisoformat(record["date"]),
                start_time=time.fromisoformat(record["start_time"]),
                end_time=time.fromisoformat(record["end_time"]),
                is_available=record["is_available"],
            )
            self._slots[slot.id] = slot
            self._keys[_slot_key(slot.court_id, slot.date, slot.start_time)] = slot.id
            self._next_id = max(self._next_id, slot.id + 1)

        logger.debug("Loaded %d slot(s) from %s", len(self._slots), self.path)

    def _flush(self) -> None:
        records = [
            {
                "id": slot.id,
                "court_id": slot.court_id,
                "date": slot.date.isoformat(),
                "start_time": slot.start_time.isoformat(),
                "end_time": slot.end_time.isoformat(),
                "is_available": slot.is_available,
            }
            for slot in self._slots.values()
        ]

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
            tmp_path.replace(self.path)
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise
