"""Pollers driving periodic updates."""

from resseltrafiken.adapters.pollers.timetable_poller import TimetablePoller

__all__ = ["TimetablePoller"]
