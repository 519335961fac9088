"""Application services."""

from resseltrafiken.application.services.departure_selector import process_schedule_times
from resseltrafiken.application.services.holiday_calculator import (
    calculate_easter,
    calculate_midsummer,
    get_holidays,
    holiday_name,
    is_holiday,
)
from resseltrafiken.application.services.schedule_resolver import (
    get_basic_schedule_type,
    get_schedule_display_name,
    get_schedule_type,
    is_after_last_departure,
)
from resseltrafiken.application.services.timetable_service import TimetableService

__all__ = [
    "TimetableService",
    "calculate_easter",
    "calculate_midsummer",
    "get_basic_schedule_type",
    "get_holidays",
    "get_schedule_display_name",
    "get_schedule_type",
    "holiday_name",
    "is_after_last_departure",
    "is_holiday",
    "process_schedule_times",
]
