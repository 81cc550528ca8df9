# medreminder/config.py
"""Runtime settings for the medication reminder, read from the environment."""

import os
from dotenv import load_dotenv

load_dotenv()

# ----------------- Reminder Ticker -----------------
TICK_SECONDS = float(os.getenv("MEDREMINDER_TICK_SECONDS", "60"))

# ----------------- Logging -----------------
LOG_LEVEL = os.getenv("MEDREMINDER_LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("MEDREMINDER_LOG_FILE") or None
ACTIVITY_LOG = os.getenv("MEDREMINDER_ACTIVITY_LOG") or None

# ----------------- Export -----------------
EXPORT_PATH = os.getenv("MEDREMINDER_EXPORT_PATH", "missed.csv")

DATE_FMT = "%Y-%m-%d"
TIME_FMT = "%H:%M"
