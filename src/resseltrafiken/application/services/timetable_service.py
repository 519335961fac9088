"""Timetable service computing the views shown each tick."""

import logging
from datetime import datetime

from resseltrafiken.application.services.departure_selector import process_schedule_times
from resseltrafiken.application.services.schedule_resolver import get_schedule_type
from resseltrafiken.domain.models.display_settings import DisplaySettings
from resseltrafiken.domain.models.processed_departure import ProcessedDeparture
from resseltrafiken.domain.models.schedule_type import ScheduleType
from resseltrafiken.domain.models.timetable import RouteTimetable, TimetableDocument
from resseltrafiken.domain.models.timetable_view import TimetableView

logger = logging.getLogger(__name__)


class TimetableService:
    """Service that resolves the schedule and selects departures for every stop."""

    def __init__(self, settings: DisplaySettings) -> None:
        """Initialize with display settings."""
        self._settings = settings

    def build_views(self, timetable: TimetableDocument, now: datetime) -> list[TimetableView]:
        """Compute the timetables to display at a given moment.

        Args:
            timetable: The validated timetable document.
            now: Current local time.

        Returns:
            One view per displayed route section, in document order.
        """
        schedule_type = get_schedule_type(now, timetable)
        logger.debug(f"Resolved schedule type {schedule_type} at {now:%Y-%m-%d %H:%M}")

        views = []
        for route in timetable.routes:
            if route.is_return and not self._settings.show_both_directions:
                continue
            views.append(self._build_view(route, schedule_type, now))
        return views

    def _build_view(
        self, route: RouteTimetable, schedule_type: ScheduleType, now: datetime
    ) -> TimetableView:
        stops = route.stops_for(schedule_type)
        if not stops:
            logger.debug(f"No {schedule_type} departures for route {route.key}")

        departures: dict[str, list[ProcessedDeparture]] = {
            stop_name: process_schedule_times(times, now, self._settings.max_visible_departures)
            for stop_name, times in stops.items()
        }
        return TimetableView(
            title=route.title,
            schedule_type=schedule_type,
            now=now,
            departures=departures,
            highlight_stop=self._highlight_stop_for(route),
        )

    def _highlight_stop_for(self, route: RouteTimetable) -> str | None:
        if route.highlight_stop:
            return route.highlight_stop
        if route.is_return:
            return self._settings.return_stop
        return self._settings.highlight_stop
