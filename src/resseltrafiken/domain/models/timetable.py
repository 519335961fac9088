"""Timetable document domain models."""

from dataclasses import dataclass, field
from datetime import date

from .schedule_type import ScheduleType


@dataclass(frozen=True)
class ValidityPeriod:
    """Dates between which a published timetable applies."""

    start_date: date
    end_date: date

    def has_elapsed(self, today: date) -> bool:
        """Return True once today is past the last valid date."""
        return today > self.end_date


@dataclass(frozen=True)
class TimetableMetadata:
    """Version and validity information of a timetable document."""

    version: str
    valid_period: ValidityPeriod


@dataclass(frozen=True)
class RouteTimetable:
    """Departures of one route (or one direction of a route)."""

    key: str  # e.g. "sjo_staden" or "city_line/Nybroplan_to_Hammarbysjöstad"
    title: str
    schedules: dict[ScheduleType, dict[str, tuple[str, ...]]] = field(default_factory=dict)
    highlight_stop: str | None = None  # Overrides the configured highlight stop
    is_return: bool = False  # Return direction, hidden unless both directions are shown

    def stops_for(self, schedule_type: ScheduleType) -> dict[str, tuple[str, ...]]:
        """Return stop name -> raw departure times, empty when the section is absent."""
        return self.schedules.get(schedule_type, {})


@dataclass(frozen=True)
class TimetableDocument:
    """A validated, read-only timetable."""

    metadata: TimetableMetadata
    routes: list[RouteTimetable]

    def is_stale(self, today: date) -> bool:
        """Return True if the validity period has elapsed."""
        return self.metadata.valid_period.has_elapsed(today)
