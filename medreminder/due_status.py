# medreminder/due_status.py
"""Classify a medication as Taken, Pending or Missed against a time of day."""

from datetime import time
from enum import Enum
from typing import List

from medreminder.clock import truncate
from medreminder.schedule_store import Medication, ScheduleStore


class DoseStatus(Enum):
    TAKEN = "Taken"
    PENDING = "Pending"
    MISSED = "Missed"


def classify(entry: Medication, now: time) -> DoseStatus:
    if entry.taken:
        return DoseStatus.TAKEN
    # a dose due this very minute is still pending
    if entry.scheduled_time < truncate(now):
        return DoseStatus.MISSED
    return DoseStatus.PENDING


def missed_entries(store: ScheduleStore, now: time) -> List[Medication]:
    """Every Missed entry across all dates, in store order."""
    return [med for _, med in store.all_entries() if classify(med, now) is DoseStatus.MISSED]


def due_reminders(entries: List[Medication], at: time):
    """
    Pick the untaken entries whose time has come by `at`.

    Returns ``(entry, status)`` pairs: PENDING for a dose due this minute,
    MISSED for one already past and still untaken.
    """
    due = []
    for med in entries:
        status = classify(med, at)
        if status is not DoseStatus.TAKEN and med.scheduled_time <= truncate(at):
            due.append((med, status))
    return due
