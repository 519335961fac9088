"""Timetable view domain model."""

from dataclasses import dataclass, field
from datetime import datetime

from .processed_departure import ProcessedDeparture
from .schedule_type import ScheduleType


@dataclass(frozen=True)
class TimetableView:
    """Everything a renderer needs to draw one timetable for one tick."""

    title: str
    schedule_type: ScheduleType
    now: datetime
    departures: dict[str, list[ProcessedDeparture]] = field(default_factory=dict)
    highlight_stop: str | None = None

    @property
    def schedule_label(self) -> str:
        return self.schedule_type.display_name
