"""Domain models for Resseltrafiken timetables."""

from resseltrafiken.domain.models.display_settings import DisplaySettings
from resseltrafiken.domain.models.errors import (
    InvalidTimeError,
    TimetableError,
    TimetableValidationError,
)
from resseltrafiken.domain.models.processed_departure import ProcessedDeparture
from resseltrafiken.domain.models.schedule_type import ScheduleType
from resseltrafiken.domain.models.time_of_day import MINUTES_PER_DAY, TimeOfDay
from resseltrafiken.domain.models.timetable import (
    RouteTimetable,
    TimetableDocument,
    TimetableMetadata,
    ValidityPeriod,
)
from resseltrafiken.domain.models.timetable_view import TimetableView

__all__ = [
    "MINUTES_PER_DAY",
    "DisplaySettings",
    "InvalidTimeError",
    "ProcessedDeparture",
    "RouteTimetable",
    "ScheduleType",
    "TimeOfDay",
    "TimetableDocument",
    "TimetableError",
    "TimetableMetadata",
    "TimetableValidationError",
    "TimetableView",
    "ValidityPeriod",
]
