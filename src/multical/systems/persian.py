"""
multical.systems.persian
------------------------
Arithmetic Persian (Solar Hijri) calendar on the 2820-year grand cycle.

Leap years follow ((epyear + 38) * 682) mod 2816 < 682, where epyear is the
year folded into the cycle that starts at 474 AP. The same cycle arithmetic
counts days from the epoch, so month lengths, the leap test and the Gregorian
bridge always agree. Years are continuous through 0 and negative values.
"""

from __future__ import annotations

from ..core.time import from_jdn, to_jdn
from ..core.types import DateHolder, GregorianDate
from .base import TabularCalendarSystem, normalize_month

# JDN of 1 Farvardin 1 AP (19 March 622, Julian; 22 March 622, proleptic Gregorian).
PERSIAN_EPOCH_JDN = 1948321

CYCLE_YEARS = 2820
CYCLE_DAYS = 1029983  # 2820 * 365 + 683 leap days
_CYCLE_BASE = 474


def _epyear(year: int) -> int:
    return _CYCLE_BASE + (year - _CYCLE_BASE) % CYCLE_YEARS


def days_before_year(year: int) -> int:
    """Days from the epoch to 1 Farvardin of `year`."""
    epbase = year - _CYCLE_BASE
    epyear = _epyear(year)
    return (
        (epyear * 682 - 110) // 2816
        + (epyear - 1) * 365
        + (epbase // CYCLE_YEARS) * CYCLE_DAYS
    )


_DAYS_BEFORE_475 = days_before_year(_CYCLE_BASE + 1)


class PersianSystem(TabularCalendarSystem):

    def is_leap_year(self, year: int) -> bool:
        return ((_epyear(year) + 38) * 682) % 2816 < 682

    def to_gregorian(self, native: DateHolder) -> GregorianDate:
        year, month = normalize_month(native.year, native.month)
        ordinal = days_before_year(year) + self.day_of_year(year, month, native.day) - 1
        return from_jdn(PERSIAN_EPOCH_JDN + ordinal)

    def from_gregorian(self, gregorian: GregorianDate) -> DateHolder:
        year, month = normalize_month(gregorian.year, gregorian.month)
        ordinal = to_jdn(GregorianDate(year, month, gregorian.day)) - PERSIAN_EPOCH_JDN
        year = self._year_from_ordinal(ordinal)
        return self.date_from_day_of_year(year, ordinal - days_before_year(year) + 1)

    @staticmethod
    def _year_from_ordinal(ordinal: int) -> int:
        cycle, cyear = divmod(ordinal - _DAYS_BEFORE_475, CYCLE_DAYS)
        if cyear == CYCLE_DAYS - 1:
            ycycle = CYCLE_YEARS
        else:
            aux1, aux2 = divmod(cyear, 366)
            ycycle = (2134 * aux1 + 2816 * aux2 + 2815) // 1028522 + aux1 + 1
        year = ycycle + CYCLE_YEARS * cycle + _CYCLE_BASE

        while days_before_year(year) > ordinal:
            year -= 1
        while days_before_year(year + 1) <= ordinal:
            year += 1
        return year
