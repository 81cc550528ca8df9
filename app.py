# app.py – Medication Reminder (interactive session + background reminder ticker)

import sys
import logging

from medreminder import config
from medreminder.logger import setup_logging
from medreminder.reminder_manager import ReminderTicker
from medreminder.schedule_store import ScheduleStore
from medreminder.session import Session

logger = logging.getLogger(__name__)


def main(stdin=sys.stdin, stdout=sys.stdout, interval: float = config.TICK_SECONDS) -> int:
    setup_logging()

    store = ScheduleStore()
    ticker = ReminderTicker(interval=interval)
    # daemon thread: killed with the process, no shutdown signal needed
    ticker.start()

    Session(store, ticker.events, stdin=stdin, stdout=stdout).run()
    logger.info("Session ended")
    return 0


# ----------------- Run -----------------
if __name__ == '__main__':
    sys.exit(main())
