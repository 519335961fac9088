"""Protocol for periodic timetable updates."""

from typing import Protocol


class TimetablePollerProtocol(Protocol):
    """Protocol for recomputing and displaying timetables on a timer."""

    async def start(self) -> None:
        """Start the poller."""
        ...

    async def stop(self) -> None:
        """Stop the poller."""
        ...
