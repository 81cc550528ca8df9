# medreminder/exporter.py
"""Missed-Dose Exporter: write missed entries to a CSV file."""

import csv
import logging
from typing import Iterable

from medreminder.clock import format_time
from medreminder.errors import IoFailure
from medreminder.schedule_store import Medication

logger = logging.getLogger(__name__)

HEADERS = ["name", "time", "taken"]


def export_missed_doses(entries: Iterable[Medication], path: str) -> int:
    """Overwrite `path` with one row per entry. Returns the number of rows written."""
    count = 0
    try:
        with open(path, "w", newline="", encoding="utf-8", errors="backslashreplace") as f:
            writer = csv.writer(f)
            writer.writerow(HEADERS)
            for med in entries:
                writer.writerow([med.name, format_time(med.scheduled_time), str(med.taken).lower()])
                count += 1
    except (OSError, ValueError) as e:
        # ValueError: open() rejects paths with NUL bytes
        logger.error("Export to %s failed: %s", path, e)
        raise IoFailure(path, e) from e
    logger.info("Exported %d missed doses to %s", count, path)
    return count
