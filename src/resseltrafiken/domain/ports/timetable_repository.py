"""Timetable repository port."""

from typing import Protocol

from resseltrafiken.domain.models.timetable import TimetableDocument


class TimetableRepository(Protocol):
    """Port for loading the published timetable."""

    def load(self) -> TimetableDocument:
        """Load and validate the timetable document.

        Raises:
            TimetableValidationError: If the document is structurally invalid.
        """
        ...
