"""Timetable file adapter."""

from resseltrafiken.adapters.timetable_file.json_timetable_repository import (
    JsonTimetableRepository,
    parse_timetable,
)

__all__ = ["JsonTimetableRepository", "parse_timetable"]
