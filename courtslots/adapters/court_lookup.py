"""
Court lookup backed by the courts declared in the application configuration.
"""

from typing import Dict, Iterable, List, Optional

from ..domain.models import CourtConfig


class ConfigCourtLookup:
    """
    Resolves courts from a fixed list of court records.

    Stands in for the court administration storage, which owns court
    records in a full deployment.
    """

    def __init__(self, courts: Iterable[CourtConfig]):
        self._courts: Dict[int, CourtConfig] = {court.id: court for court in courts}

    def find_by_id(self, court_id: int) -> Optional[CourtConfig]:
        return self._courts.get(court_id)

    def find_all_by_ids(self, court_ids: Iterable[int]) -> Dict[int, CourtConfig]:
        return {
            court_id: self._courts[court_id]
            for court_id in court_ids
            if court_id in self._courts
        }

    def all(self) -> List[CourtConfig]:
        """Return every known court ordered by id."""
        return [self._courts[court_id] for court_id in sorted(self._courts)]
