"""Helpers shared by the test modules."""

from datetime import datetime
from zoneinfo import ZoneInfo

STOCKHOLM = ZoneInfo("Europe/Stockholm")


def at(year: int, month: int, day: int, hour: int = 12, minute: int = 0) -> datetime:
    """Build a Stockholm-local timestamp."""
    return datetime(year, month, day, hour, minute, tzinfo=STOCKHOLM)
