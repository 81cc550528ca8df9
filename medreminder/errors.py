# medreminder/errors.py
"""Error kinds raised by the schedule store, the time parser and the exporter."""


class ReminderError(Exception):
    """Base class for every error reported back to the user."""


class ParseError(ReminderError):
    pass


class NotFound(ReminderError):
    def __init__(self, date: str):
        super().__init__(f"No medications found for {date}")
        self.date = date


class InvalidIndex(ReminderError):
    def __init__(self, index: int, count: int):
        super().__init__(f"Invalid medication index {index} (have {count})")
        self.index = index
        self.count = count


class IoFailure(ReminderError):
    def __init__(self, path: str, cause: Exception):
        super().__init__(f"{path!r}: {getattr(cause, 'strerror', None) or cause}")
        self.path = path
        self.cause = cause
