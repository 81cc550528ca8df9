# medreminder/session.py
"""
Interactive Session Loop
------------------------
Menu-driven foreground loop. Each iteration first takes at most one tick
from the ticker's queue (never waiting), prints reminders for it, then shows
the menu and blocks on one line of input.

The session owns the ScheduleStore; nothing else mutates it.
"""

import sys
import queue
import logging
from typing import Optional, TextIO

from medreminder import config
from medreminder.clock import SystemClock, format_time, parse_time
from medreminder.due_status import DoseStatus, due_reminders, missed_entries
from medreminder.errors import ParseError, ReminderError
from medreminder.exporter import export_missed_doses
from medreminder.logger import save_to_log
from medreminder.schedule_store import Medication, ScheduleStore

logger = logging.getLogger(__name__)

MENU = (
    "\nMedication Reminder\n"
    "1. Add a medication\n"
    "2. View today's medication schedule\n"
    "3. Mark medication as taken\n"
    "4. Export missed doses\n"
    "5. Exit"
)


class Session:
    def __init__(
        self,
        store: ScheduleStore,
        events: queue.Queue,
        clock=None,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
        activity_log: Optional[str] = config.ACTIVITY_LOG,
        export_path: str = config.EXPORT_PATH,
    ):
        self.store = store
        self.events = events
        self.clock = clock or SystemClock()
        self.stdin = stdin
        self.stdout = stdout
        self.activity_log = activity_log
        self.export_path = export_path
        self.commands = {
            "1": self.add_medication,
            "2": self.list_today,
            "3": self.mark_taken,
            "4": self.export_missed,
        }

    # ------------------------------------------------------------------
    # I/O
    # ------------------------------------------------------------------

    def _say(self, text: str = ""):
        print(text, file=self.stdout)

    def _ask(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------

    def run(self):
        while self.step():
            pass

    def step(self) -> bool:
        """Run one iteration. Returns False once the session should end."""
        self.check_reminders()
        self._say(MENU)
        try:
            choice = self._ask("Choose an option: ")
        except EOFError:
            choice = "5"

        if choice == "5":
            self._say("Goodbye!")
            return False

        command = self.commands.get(choice)
        if command is None:
            self._say("Invalid choice. Please enter a number between 1 and 5.")
            return True
        try:
            command()
        except EOFError:
            self._say("Goodbye!")
            return False
        return True

    def check_reminders(self):
        try:
            tick = self.events.get_nowait()
        except queue.Empty:
            return
        # today's entries come from the session clock; the tick only supplies the time
        for med, status in due_reminders(self.store.entries_for(self.clock.today()), tick.time):
            if status is DoseStatus.PENDING:
                self._say(f"\nReminder: It's time to take your medication: {med.name} at {format_time(med.scheduled_time)}")
            else:
                self._say(f"\nReminder: You missed your medication: {med.name} at {format_time(med.scheduled_time)}")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def add_medication(self):
        today = self.clock.today()
        name = self._ask("Enter medication name: ")
        time_input = self._ask("Enter time (HH:MM): ")
        try:
            scheduled = parse_time(time_input)
        except ParseError as e:
            logger.warning("%s", e)
            self._say("Invalid time format. Please use HH:MM.")
            return
        self.store.add(today, Medication(name, scheduled))
        save_to_log("added", {"date": today, "name": name, "time": format_time(scheduled)}, self.activity_log)
        self._say("Medication added successfully!")

    def _render(self, meds):
        for i, med in enumerate(meds, start=1):
            label = "Taken" if med.taken else "Pending"
            self._say(f"{i}. {med.name} at {format_time(med.scheduled_time)} - {label}")

    def list_today(self):
        meds = self.store.entries_for(self.clock.today())
        if not meds:
            self._say("No medications scheduled for today.")
            return
        self._say("Today's Medication Schedule:")
        self._render(meds)

    def mark_taken(self):
        today = self.clock.today()
        meds = self.store.entries_for(today)
        if not meds:
            self._say("No medications to mark as taken.")
            return

        self._say("Select a medication to mark as taken:")
        self._render(meds)
        raw = self._ask("Enter the number: ")
        try:
            index = int(raw)
        except ValueError:
            logger.warning("Non-numeric selection %r", raw)
            self._say("Invalid number.")
            return
        if not 1 <= index <= len(meds):
            self._say("Invalid number.")
            return

        try:
            self.store.mark_taken(today, index - 1)
        except ReminderError as e:
            self._say(str(e))
            return
        save_to_log("taken", {"date": today, "name": meds[index - 1].name}, self.activity_log)
        self._say("Medication marked as taken!")

    def export_missed(self):
        path = self._ask(f"Enter file name to export missed doses (e.g., {self.export_path}): ") or self.export_path
        missed = missed_entries(self.store, self.clock.now())
        try:
            count = export_missed_doses(missed, path)
        except ReminderError as e:
            self._say(f"Failed to export missed doses: {e}")
            return
        save_to_log("exported", {"path": path, "count": count}, self.activity_log)
        self._say("Missed doses exported successfully!")
