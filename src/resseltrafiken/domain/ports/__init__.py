"""Ports (interfaces) for the ports-and-adapters architecture."""

from resseltrafiken.domain.ports.display_adapter import DisplayAdapter
from resseltrafiken.domain.ports.timetable_repository import TimetableRepository
from resseltrafiken.domain.ports.timetable_view_builder import TimetableViewBuilder

__all__ = [
    "DisplayAdapter",
    "TimetableRepository",
    "TimetableViewBuilder",
]
