"""Positional astronomy: spherical geometry, calendars, sexagesimal conversion, apparent places and observing stations."""

__version__ = "0.9.10"