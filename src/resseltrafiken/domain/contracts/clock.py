"""Protocol for the current-time source."""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Callable returning the current local time."""

    def __call__(self) -> datetime:
        """Return "now" as a timezone-aware datetime."""
        ...
