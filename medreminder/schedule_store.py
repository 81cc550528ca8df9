# medreminder/schedule_store.py
"""
Schedule Store
--------------
Maps a calendar date (``YYYY-MM-DD``) to the ordered list of medications
scheduled that day. Entries are only ever appended; an entry is identified
by its position in its date's list.
"""

import copy
import logging
from dataclasses import dataclass
from datetime import time
from typing import Dict, List

from medreminder.errors import InvalidIndex, NotFound

logger = logging.getLogger(__name__)


@dataclass
class Medication:
    name: str
    scheduled_time: time
    taken: bool = False


class ScheduleStore:
    def __init__(self):
        self._medications: Dict[str, List[Medication]] = {}

    def add(self, date: str, entry: Medication) -> None:
        self._medications.setdefault(date, []).append(entry)
        logger.info("Added %s at %s for %s", entry.name, entry.scheduled_time, date)

    def entries_for(self, date: str) -> List[Medication]:
        """Return a copy of the date's entries; mutating it never touches the store."""
        return copy.deepcopy(self._medications.get(date, []))

    def mark_taken(self, date: str, index: int) -> None:
        meds = self._medications.get(date)
        if not meds:
            raise NotFound(date)
        if not 0 <= index < len(meds):
            raise InvalidIndex(index, len(meds))
        meds[index].taken = True
        logger.info("Marked %s (#%d) taken for %s", meds[index].name, index, date)

    def all_entries(self):
        """Yield ``(date, entry)`` for every entry, dates in insertion order."""
        for date, meds in self._medications.items():
            for med in meds:
                yield date, copy.copy(med)
