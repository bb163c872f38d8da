"""Estimate boundary and interior areas from hand-drawn property maps."""

__version__ = "1.0.0"
