"""Pydantic schema of the published timetable JSON file."""

from datetime import date
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _as_time_literal(value: Any) -> str:
    # Individual bad literals are tolerated here and skipped at computation time
    return value if isinstance(value, str) else str(value)


TimeLiteral = Annotated[str, BeforeValidator(_as_time_literal)]
StopDepartures = dict[str, list[TimeLiteral]]


class ValidPeriodModel(BaseModel):
    """Validity period block of the metadata."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date


class MetadataModel(BaseModel):
    """Metadata block of the timetable file."""

    model_config = ConfigDict(frozen=True, extra="allow")

    version: str
    valid_period: ValidPeriodModel


class DepartureTableModel(BaseModel):
    """A `<type>_schedule` block of a city line direction."""

    model_config = ConfigDict(extra="allow")

    departures: StopDepartures = Field(default_factory=dict)


class DirectionModel(BaseModel):
    """One direction of a route with per-schedule-type departure tables."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    title: str | None = None
    highlight_stop: str | None = None
    is_return: bool = Field(default=False, alias="return")
    weekday_schedule: DepartureTableModel | None = None
    weekend_schedule: DepartureTableModel | None = None


class RouteModel(BaseModel):
    """A route section, either with a flat schedule or with directions."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    highlight_stop: str | None = None
    schedule: dict[str, StopDepartures] | None = None
    directions: dict[str, DirectionModel] | None = None


class TimetableFileModel(BaseModel):
    """Top level of the timetable file. Both blocks are mandatory."""

    model_config = ConfigDict(extra="allow")

    metadata: MetadataModel
    routes: dict[str, RouteModel]
