"""Contracts (protocols) shared between layers."""

from resseltrafiken.domain.contracts.clock import ClockProtocol
from resseltrafiken.domain.contracts.timetable_poller import TimetablePollerProtocol

__all__ = [
    "ClockProtocol",
    "TimetablePollerProtocol",
]
