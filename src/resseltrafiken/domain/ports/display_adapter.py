"""Display adapter port."""

from abc import ABC, abstractmethod

from resseltrafiken.domain.models.timetable_view import TimetableView


class DisplayAdapter(ABC):
    """Port for showing timetables to users."""

    @abstractmethod
    async def display_timetables(self, views: list[TimetableView]) -> None:
        """Display the timetables computed for one tick."""
        ...

    @abstractmethod
    async def display_error(self, message: str) -> None:
        """Display a user-facing error notification."""
        ...
