"""Processed departure domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessedDeparture:
    """A departure selected for display in the current tick."""

    time: str  # normalised "HH:MM"
    is_today: bool  # False when the time belongs to the next calendar day
