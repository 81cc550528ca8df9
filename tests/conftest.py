"""Pytest configuration and fixtures."""

import io
import queue
from datetime import time

import pytest

from medreminder.schedule_store import ScheduleStore
from medreminder.session import Session

TODAY = "2024-03-05"


class FixedClock:
    """Clock pinned to a date and time the test can move."""

    def __init__(self, date=TODAY, now=time(7, 59)):
        self.date = date
        self.current = now

    def today(self):
        return self.date

    def now(self):
        return self.current


@pytest.fixture
def clock():
    return FixedClock()


@pytest.fixture
def store():
    return ScheduleStore()


@pytest.fixture
def events():
    return queue.Queue()


@pytest.fixture
def make_session(store, events, clock):
    """Build a session fed by scripted input lines; returns (session, stdout)."""
    def _make(*lines, activity_log=None):
        stdin = io.StringIO("".join(line + "\n" for line in lines))
        stdout = io.StringIO()
        session = Session(store, events, clock=clock, stdin=stdin, stdout=stdout,
                          activity_log=activity_log, export_path="missed.csv")
        return session, stdout
    return _make
