"""
multical.systems.hijri
----------------------
Tabular Islamic calendar (civil epoch, 11 leap years per 30-year cycle).

This is an arithmetic approximation. It can differ by a day or two from
calendars based on crescent sighting or on the Umm al-Qura tables.

The leap rule is (14 + 11*|year|) mod 30 < 11, mirrored around year 0, and
the day count before each year is built from the same rule so negative years
round-trip as well.
"""

from __future__ import annotations

from ..core.time import from_jdn, to_jdn
from ..core.types import DateHolder, GregorianDate
from .base import TabularCalendarSystem, normalize_month

# JDN of 1 Muharram 1 AH (16 July 622, Julian).
HIJRI_EPOCH_JDN = 1948440

CYCLE_YEARS = 30
CYCLE_DAYS = 10631  # 30 * 354 + 11


def _leap_years_through(n: int) -> int:
    """Leap years among 1..n, n >= 0."""
    return (14 + 11 * n) // 30


def days_before_year(year: int) -> int:
    """Days from the epoch to 1 Muharram of `year`."""
    if year >= 1:
        return (year - 1) * 354 + _leap_years_through(year - 1)
    return (year - 1) * 354 - _leap_years_through(-year)


class HijriSystem(TabularCalendarSystem):

    def is_leap_year(self, year: int) -> bool:
        return (14 + 11 * abs(year)) % 30 < 11

    def to_gregorian(self, native: DateHolder) -> GregorianDate:
        year, month = normalize_month(native.year, native.month)
        ordinal = days_before_year(year) + self.day_of_year(year, month, native.day) - 1
        return from_jdn(HIJRI_EPOCH_JDN + ordinal)

    def from_gregorian(self, gregorian: GregorianDate) -> DateHolder:
        year, month = normalize_month(gregorian.year, gregorian.month)
        ordinal = to_jdn(GregorianDate(year, month, gregorian.day)) - HIJRI_EPOCH_JDN

        cycle, rem = divmod(ordinal, CYCLE_DAYS)
        year = CYCLE_YEARS * cycle + (CYCLE_YEARS * rem) // CYCLE_DAYS + 1
        while days_before_year(year) > ordinal:
            year -= 1
        while days_before_year(year + 1) <= ordinal:
            year += 1

        return self.date_from_day_of_year(year, ordinal - days_before_year(year) + 1)
