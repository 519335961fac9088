"""Boat departure timetables for Resseltrafiken."""

__version__ = "2.0.0"
