"""Adapters layer - external system integrations."""

from resseltrafiken.adapters.config import AppConfig
from resseltrafiken.adapters.console import ConsoleDisplayAdapter
from resseltrafiken.adapters.pollers import TimetablePoller
from resseltrafiken.adapters.timetable_file import JsonTimetableRepository

__all__ = [
    "AppConfig",
    "ConsoleDisplayAdapter",
    "JsonTimetableRepository",
    "TimetablePoller",
]
