"""Schedule type domain model."""

from enum import StrEnum


class ScheduleType(StrEnum):
    """Service pattern that governs a day's departures."""

    WEEKDAY = "weekday"
    WEEKEND = "weekend"

    @property
    def display_name(self) -> str:
        """Swedish label shown above the timetables."""
        return "Vardagar" if self is ScheduleType.WEEKDAY else "Helgtrafik"
