"""Display settings domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DisplaySettings:
    """Options that shape the timetables computed each tick."""

    max_visible_departures: int = 9  # Maximum departures shown per stop
    highlight_stop: str | None = "Lumabryggan"  # Stop whose next departure is highlighted
    return_stop: str | None = "Nybroplan"  # Highlighted stop on return-direction timetables
    show_both_directions: bool = True  # If False, return-direction timetables are hidden
