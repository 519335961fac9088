"""Timetable repository reading the published JSON file."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from resseltrafiken.adapters.timetable_file.schema import (
    DepartureTableModel,
    RouteModel,
    StopDepartures,
    TimetableFileModel,
)
from resseltrafiken.domain.models.errors import TimetableError, TimetableValidationError
from resseltrafiken.domain.models.schedule_type import ScheduleType
from resseltrafiken.domain.models.timetable import (
    RouteTimetable,
    TimetableDocument,
    TimetableMetadata,
    ValidityPeriod,
)
from resseltrafiken.domain.ports.timetable_repository import TimetableRepository

if TYPE_CHECKING:
    from resseltrafiken.domain.contracts.clock import ClockProtocol

logger = logging.getLogger(__name__)


def _freeze_stops(stops: StopDepartures) -> dict[str, tuple[str, ...]]:
    return {stop_name: tuple(times) for stop_name, times in stops.items()}


def _parse_schedule_types(schedule: dict[str, StopDepartures], route_key: str) -> dict[
    ScheduleType, dict[str, tuple[str, ...]]
]:
    schedules: dict[ScheduleType, dict[str, tuple[str, ...]]] = {}
    for type_name, stops in schedule.items():
        try:
            schedule_type = ScheduleType(type_name)
        except ValueError:
            logger.warning(f"Ignoring unknown schedule type {type_name!r} on route {route_key}")
            continue
        schedules[schedule_type] = _freeze_stops(stops)
    return schedules


def _direction_schedules(
    tables: dict[ScheduleType, DepartureTableModel | None],
) -> dict[ScheduleType, dict[str, tuple[str, ...]]]:
    return {
        schedule_type: _freeze_stops(table.departures)
        for schedule_type, table in tables.items()
        if table is not None
    }


def _route_sections(key: str, route: RouteModel) -> list[RouteTimetable]:
    """Flatten a route into one section per direction (or one for a flat schedule)."""
    title = route.name or key
    sections: list[RouteTimetable] = []

    if route.schedule is not None:
        sections.append(
            RouteTimetable(
                key=key,
                title=title,
                schedules=_parse_schedule_types(route.schedule, key),
                highlight_stop=route.highlight_stop,
            )
        )

    for direction_key, direction in (route.directions or {}).items():
        sections.append(
            RouteTimetable(
                key=f"{key}/{direction_key}",
                title=direction.title or f"{title} {direction_key}",
                schedules=_direction_schedules(
                    {
                        ScheduleType.WEEKDAY: direction.weekday_schedule,
                        ScheduleType.WEEKEND: direction.weekend_schedule,
                    }
                ),
                highlight_stop=direction.highlight_stop or route.highlight_stop,
                is_return=direction.is_return,
            )
        )

    if not sections:
        logger.warning(f"Route {key} has neither a schedule nor directions")
    return sections


def parse_timetable(data: Any) -> TimetableDocument:
    """Validate raw timetable data and convert it into a TimetableDocument.

    Raises:
        TimetableValidationError: If metadata or routes are missing or malformed.
    """
    if not isinstance(data, dict):
        raise TimetableValidationError("Timetable document must be a JSON object")
    try:
        model = TimetableFileModel.model_validate(data)
    except ValidationError as e:
        raise TimetableValidationError(f"Invalid timetable structure: {e}") from e

    period = model.metadata.valid_period
    metadata = TimetableMetadata(
        version=model.metadata.version,
        valid_period=ValidityPeriod(start_date=period.start_date, end_date=period.end_date),
    )
    routes: list[RouteTimetable] = []
    for key, route in model.routes.items():
        routes.extend(_route_sections(key, route))
    return TimetableDocument(metadata=metadata, routes=routes)


class JsonTimetableRepository(TimetableRepository):
    """Loads the timetable document from a JSON file."""

    def __init__(self, path: str | Path, clock: ClockProtocol | None = None) -> None:
        """Initialize the repository.

        Args:
            path: Path to the JSON timetable file.
            clock: Source of the current time used for the validity check.
        """
        self.path = Path(path)
        self._clock = clock or datetime.now

    def load(self) -> TimetableDocument:
        """Load and validate the timetable file.

        Raises:
            TimetableError: If the file cannot be read.
            TimetableValidationError: If the document is structurally invalid.
        """
        logger.debug(f"Loading timetable data from {self.path}")
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise TimetableValidationError(
                f"Timetable file {self.path} is not valid JSON: {e}"
            ) from e
        except OSError as e:
            raise TimetableError(f"Could not read timetable file {self.path}: {e}") from e

        document = parse_timetable(data)

        period = document.metadata.valid_period
        if document.is_stale(self._clock().date()):
            logger.warning(
                f"Timetable data may be outdated: valid until {period.end_date.isoformat()}"
            )
        logger.info(
            f"Loaded timetable version {document.metadata.version} "
            f"({period.start_date.isoformat()} - {period.end_date.isoformat()}) "
            f"with {len(document.routes)} route section(s)"
        )
        return document
