"""Plain-text display of timetables."""

import sys
from typing import TextIO

from resseltrafiken.domain.models.processed_departure import ProcessedDeparture
from resseltrafiken.domain.models.time_of_day import TimeOfDay
from resseltrafiken.domain.models.timetable_view import TimetableView
from resseltrafiken.domain.ports.display_adapter import DisplayAdapter

SOON_THRESHOLD_MINUTES = 10
DEPARTURES_HEADER = "Avgångar"


def find_next_departure(
    departures: list[ProcessedDeparture], now_minutes: int
) -> ProcessedDeparture | None:
    """Return the first departure later today than now, if any."""
    for departure in departures:
        if departure.is_today and TimeOfDay.parse(departure.time).minutes > now_minutes:
            return departure
    return None


def format_departure(
    departure: ProcessedDeparture, next_departure: ProcessedDeparture | None, now_minutes: int
) -> str:
    """Format one departure time.

    Tomorrow's departures are wrapped in parentheses. The next departure at
    the highlighted stop is wrapped in brackets, or in angle brackets when it
    leaves within ten minutes.
    """
    if departure is next_departure:
        minutes_until = TimeOfDay.parse(departure.time).minutes - now_minutes
        if minutes_until <= SOON_THRESHOLD_MINUTES:
            return f">{departure.time}<"
        return f"[{departure.time}]"
    if not departure.is_today:
        return f"({departure.time})"
    return f" {departure.time} "


def format_timetable(view: TimetableView) -> str:
    """Render one timetable view as text."""
    now_minutes = TimeOfDay.from_datetime(view.now).minutes
    lines = [f"{view.title} - {view.schedule_label}", DEPARTURES_HEADER]

    if not view.departures:
        lines.append("  Inga avgångar")
    name_width = max((len(stop) for stop in view.departures), default=0)

    for stop_name, departures in view.departures.items():
        is_highlighted = stop_name == view.highlight_stop
        next_departure = find_next_departure(departures, now_minutes) if is_highlighted else None
        times = " ".join(format_departure(d, next_departure, now_minutes) for d in departures)
        marker = "*" if is_highlighted else " "
        lines.append(f"{marker} {stop_name:<{name_width}}  {times}".rstrip())

    return "\n".join(lines)


class ConsoleDisplayAdapter(DisplayAdapter):
    """Writes timetables to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        """Initialize the adapter.

        Args:
            stream: Output stream, defaults to stdout.
        """
        self.stream = stream or sys.stdout

    async def display_timetables(self, views: list[TimetableView]) -> None:
        """Write all timetables, separated by blank lines."""
        if views:
            self.stream.write(f"{views[0].now:%Y-%m-%d %H:%M}\n\n")
        self.stream.write("\n\n".join(format_timetable(view) for view in views))
        self.stream.write("\n")
        self.stream.flush()

    async def display_error(self, message: str) -> None:
        """Write an error notification."""
        self.stream.write(f"FEL: {message}\n")
        self.stream.flush()
