# medreminder/logger.py
import json
import logging
import datetime
from typing import Optional

from medreminder import config

logger = logging.getLogger(__name__)


def setup_logging(level: str = config.LOG_LEVEL, log_file: Optional[str] = config.LOG_FILE):
    """
    Configure the root logger once for the whole process.

    Diagnostics go to stderr (or `log_file`) so they never interleave with
    the menu printed on stdout.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(message)s",
        filename=log_file,
    )


def save_to_log(event, details=None, log_file=config.ACTIVITY_LOG):
    """Append one activity record as a JSON line. No-op when `log_file` is unset."""
    if not log_file:
        return
    entry = {"time": str(datetime.datetime.now()), "event": event}
    entry.update(details or {})
    try:
        with open(log_file, 'a', encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")
    except OSError as e:
        logger.warning("Activity log %s not written: %s", log_file, e)
