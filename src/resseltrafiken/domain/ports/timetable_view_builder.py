"""Timetable view builder port."""

from datetime import datetime
from typing import Protocol

from resseltrafiken.domain.models.timetable import TimetableDocument
from resseltrafiken.domain.models.timetable_view import TimetableView


class TimetableViewBuilder(Protocol):
    """Port for computing what every timetable shows at a moment."""

    def build_views(self, timetable: TimetableDocument, now: datetime) -> list[TimetableView]:
        """Compute one view per route section for the given local time.

        Args:
            timetable: The loaded timetable document.
            now: Current local time, timezone-aware.

        Returns:
            Views in timetable order.
        """
        ...
