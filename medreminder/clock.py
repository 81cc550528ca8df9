# medreminder/clock.py
"""
Clock Source and time-of-day helpers.

All scheduling works at hour:minute granularity, so every time handed out
by the clock is truncated to the minute.
"""

import re
from datetime import datetime, time

from medreminder.config import DATE_FMT, TIME_FMT
from medreminder.errors import ParseError

_HHMM = re.compile(r"^\d{2}:\d{2}$")


class SystemClock:
    """Reads the local wall clock. Holds no state."""

    def today(self) -> str:
        return datetime.now().strftime(DATE_FMT)

    def now(self) -> time:
        return truncate(datetime.now().time())


def truncate(t: time) -> time:
    return t.replace(second=0, microsecond=0)


def parse_time(text: str) -> time:
    """Parse a strict, zero-padded 24-hour `HH:MM` string."""
    text = text.strip()
    # strptime alone accepts "8:00"
    if not _HHMM.match(text):
        raise ParseError(f"Invalid time {text!r}, expected HH:MM")
    try:
        return datetime.strptime(text, TIME_FMT).time()
    except ValueError as e:
        raise ParseError(f"Invalid time {text!r}, expected HH:MM") from e


def format_time(t: time) -> str:
    return t.strftime(TIME_FMT)
