"""Diagnostics package.

Light-weight command line checks over the calendar systems.
"""

__all__ = ["pretty_month", "round_trip"]
