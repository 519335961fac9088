"""Domain exceptions."""


class TimetableError(Exception):
    """Base class for timetable errors."""


class TimetableValidationError(TimetableError):
    """Raised when a timetable document is structurally invalid."""


class InvalidTimeError(TimetableError, ValueError):
    """Raised when a time literal cannot be parsed as HH:MM."""
