"""Shared fixtures for timetable tests."""

from typing import Any

import pytest

from resseltrafiken.adapters.timetable_file import parse_timetable
from resseltrafiken.domain.models import TimetableDocument


@pytest.fixture
def timetable_data() -> dict[str, Any]:
    """Raw timetable document in the published JSON layout."""
    return {
        "metadata": {
            "version": "test-1",
            "valid_period": {"start_date": "2025-01-01", "end_date": "2025-12-31"},
        },
        "routes": {
            "sjo_staden": {
                "name": "Sjöstadstrafiken",
                "schedule": {
                    "weekday": {
                        "Lumabryggan": ["06:30", "08:00", "12:00", "23:00"],
                        "Saltsjöqvarn": ["06:35", "08:05", "12:05", "22:55"],
                    },
                    "weekend": {
                        "Lumabryggan": ["09:00", "15:00", "22:00"],
                        "Saltsjöqvarn": ["09:05", "15:05", "21:55"],
                    },
                },
            },
            "city_line": {
                "name": "M/S Emelie",
                "directions": {
                    "Hammarbysjöstad_to_Nybroplan": {
                        "title": "M/S Emelie → City",
                        "weekday_schedule": {
                            "departures": {
                                "Lumabryggan": ["07:10", "17:10"],
                                "Nybroplan": ["07:45", "17:45"],
                            }
                        },
                        "weekend_schedule": {
                            "departures": {
                                "Lumabryggan": ["10:10"],
                                "Nybroplan": ["10:45"],
                            }
                        },
                    },
                    "Nybroplan_to_Hammarbysjöstad": {
                        "title": "M/S Emelie ← City",
                        "return": True,
                        "weekday_schedule": {
                            "departures": {
                                "Nybroplan": ["07:50", "17:50"],
                                "Lumabryggan": ["08:25", "18:25"],
                            }
                        },
                    },
                },
            },
        },
    }


@pytest.fixture
def timetable(timetable_data: dict[str, Any]) -> TimetableDocument:
    """Validated sample timetable. Weekday service ends 23:00, weekend 22:00."""
    return parse_timetable(timetable_data)
