"""Weekday/weekend schedule resolution."""

import logging
from datetime import datetime, timedelta

from resseltrafiken.application.services.holiday_calculator import is_holiday
from resseltrafiken.domain.models.schedule_type import ScheduleType
from resseltrafiken.domain.models.time_of_day import TimeOfDay
from resseltrafiken.domain.models.timetable import TimetableDocument

logger = logging.getLogger(__name__)

_SATURDAY = 5
_SUNDAY = 6


def _is_weekend_day(moment: datetime) -> bool:
    return moment.weekday() in (_SATURDAY, _SUNDAY)


def get_basic_schedule_type(now: datetime) -> ScheduleType:
    """Return weekend on Saturdays and Sundays, weekday otherwise."""
    return ScheduleType.WEEKEND if _is_weekend_day(now) else ScheduleType.WEEKDAY


def find_last_departure(
    timetable: TimetableDocument, schedule_type: ScheduleType
) -> TimeOfDay | None:
    """Find the latest departure across all stops of all routes.

    Absent route sections contribute nothing. Time literals that cannot be
    parsed are logged and skipped.

    Returns:
        The latest departure time, or None if the schedule has no valid times.
    """
    latest: TimeOfDay | None = None
    for route in timetable.routes:
        for stop_name, times in route.stops_for(schedule_type).items():
            for raw_time in times:
                parsed = TimeOfDay.try_parse(raw_time)
                if parsed is None:
                    logger.warning(
                        f"Skipping invalid time {raw_time!r} for {stop_name} on route {route.key}"
                    )
                    continue
                if latest is None or parsed > latest:
                    latest = parsed
    return latest


def is_after_last_departure(
    now: datetime, timetable: TimetableDocument, schedule_type: ScheduleType
) -> bool:
    """Return True if now's time of day is past the day's last departure."""
    latest = find_last_departure(timetable, schedule_type)
    # An empty schedule compares against midnight.
    latest_minutes = latest.minutes if latest is not None else 0
    return TimeOfDay.from_datetime(now).minutes > latest_minutes


def get_schedule_type(now: datetime, timetable: TimetableDocument) -> ScheduleType:
    """Determine the schedule type to display.

    Holidays always use the weekend schedule. Once the day's service has
    ended, the schedule type of tomorrow is shown instead, since the earliest
    departures on display belong to the next day.
    """
    if is_holiday(now.date()):
        return ScheduleType.WEEKEND

    basic_type = get_basic_schedule_type(now)
    if is_after_last_departure(now, timetable, basic_type):
        tomorrow = now + timedelta(days=1)
        if is_holiday(tomorrow.date()) or _is_weekend_day(tomorrow):
            return ScheduleType.WEEKEND
        return ScheduleType.WEEKDAY

    return basic_type


def get_schedule_display_name(schedule_type: ScheduleType) -> str:
    """Return the Swedish display name for a schedule type."""
    return schedule_type.display_name
