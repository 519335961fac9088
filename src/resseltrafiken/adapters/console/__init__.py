"""Console display adapter."""

from resseltrafiken.adapters.console.console_display import (
    ConsoleDisplayAdapter,
    format_timetable,
)

__all__ = ["ConsoleDisplayAdapter", "format_timetable"]
