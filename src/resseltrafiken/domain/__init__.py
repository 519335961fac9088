"""Domain layer - core business logic and models."""

from resseltrafiken.domain.models import (
    ProcessedDeparture,
    RouteTimetable,
    ScheduleType,
    TimeOfDay,
    TimetableDocument,
    TimetableView,
)
from resseltrafiken.domain.ports import DisplayAdapter, TimetableRepository

__all__ = [
    "DisplayAdapter",
    "ProcessedDeparture",
    "RouteTimetable",
    "ScheduleType",
    "TimeOfDay",
    "TimetableDocument",
    "TimetableRepository",
    "TimetableView",
]
