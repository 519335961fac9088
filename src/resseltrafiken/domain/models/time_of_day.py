"""Time-of-day domain model."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime

from resseltrafiken.domain.models.errors import InvalidTimeError

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """A wall-clock time without a date, stored as minutes since midnight."""

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise InvalidTimeError(f"Minutes since midnight out of range: {self.minutes}")

    @classmethod
    def parse(cls, value: str) -> TimeOfDay:
        """Parse an "HH:MM" literal.

        Raises:
            InvalidTimeError: If the literal is not a valid 24-hour clock time.
        """
        if not isinstance(value, str):
            raise InvalidTimeError(f"Time must be a string, got {type(value).__name__}")
        match = _TIME_PATTERN.match(value)
        if not match:
            raise InvalidTimeError(f"Invalid time literal: {value!r}")
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            raise InvalidTimeError(f"Invalid time literal: {value!r}")
        return cls(hours * 60 + minutes)

    @classmethod
    def try_parse(cls, value: str) -> TimeOfDay | None:
        """Parse an "HH:MM" literal, returning None instead of raising."""
        try:
            return cls.parse(value)
        except InvalidTimeError:
            return None

    @classmethod
    def from_datetime(cls, moment: datetime) -> TimeOfDay:
        """Take the hour and minute of a timestamp, dropping seconds."""
        return cls(moment.hour * 60 + moment.minute)

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"
