"""
multical.systems.interfaces
---------------------------
The boundary between the calendar-agnostic field engine and the arithmetic of
one calendar. A system is a stateless strategy: it answers questions about
native (year, month, day) triples and bridges them to the proleptic Gregorian
calendar. It never holds a date of its own.

Months are 0-based throughout (0 = first month of the native year).
"""

from __future__ import annotations

from typing import Mapping, Protocol

from ..core.types import CalendarType, DateHolder, Field, GregorianDate


class CalendarSystemProtocol(Protocol):
    @property
    def calendar_type(self) -> CalendarType:
        ...

    @property
    def default_first_day_of_week(self) -> int:
        """Weekday constant (SUNDAY=1 .. SATURDAY=7) that starts a week."""
        ...

    @property
    def default_locale(self) -> str:
        """Language whose native names this calendar displays by default."""
        ...

    @property
    def minimum(self) -> Mapping[Field, int]:
        ...

    @property
    def maximum(self) -> Mapping[Field, int]:
        ...

    @property
    def least_maximum(self) -> Mapping[Field, int]:
        ...

    # ---------------------------------------------------------
    # 1. Calendar facts
    # ---------------------------------------------------------
    def is_leap_year(self, year: int) -> bool:
        ...

    def month_length(self, year: int, month: int) -> int:
        ...

    def year_length(self, year: int) -> int:
        ...

    def day_of_year(self, year: int, month: int, day: int) -> int:
        """1-based ordinal of the day within its year."""
        ...

    def date_from_day_of_year(self, year: int, day_of_year: int) -> DateHolder:
        """Inverse of day_of_year for 1 <= day_of_year <= year_length(year)."""
        ...

    # ---------------------------------------------------------
    # 2. Gregorian bridge
    # ---------------------------------------------------------
    def to_gregorian(self, native: DateHolder) -> GregorianDate:
        ...

    def from_gregorian(self, gregorian: GregorianDate) -> DateHolder:
        ...
