# medreminder/reminder_manager.py
import queue
import logging
import threading
from dataclasses import dataclass
from datetime import time
from typing import Optional

import schedule

from medreminder import config
from medreminder.clock import SystemClock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tick:
    # informational; the session re-reads today from its own clock
    date: str
    time: time


class ReminderTicker:
    """
    Background time-signal source.

    Every `interval` seconds a `Tick` snapshot of the clock is put on an
    unbounded queue. The ticker never looks at the schedule; the session
    drains the queue and decides what to remind about.
    """

    def __init__(self, interval: float = config.TICK_SECONDS, clock=None, events: Optional[queue.Queue] = None):
        self.interval = interval
        self.clock = clock or SystemClock()
        self.events = events if events is not None else queue.Queue()
        self._scheduler = schedule.Scheduler()
        self._scheduler.every(interval).seconds.do(self.emit)
        self._stop = threading.Event()
        self._thread = None

    def emit(self):
        tick = Tick(self.clock.today(), self.clock.now())
        self.events.put(tick)
        logger.debug("Tick %s %s", tick.date, tick.time)

    def run(self):
        self.emit()
        while not self._stop.is_set():
            self._scheduler.run_pending()
            self._stop.wait(min(1, self.interval))

    def start(self):
        self._thread = threading.Thread(target=self.run, name="reminder-ticker")
        self._thread.daemon = True
        self._thread.start()
        logger.info("Reminder ticker started (every %ss)", self.interval)
        return self._thread

    def stop(self, timeout: float = 5):
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
        logger.info("Reminder ticker stopped")
