from __future__ import annotations

from ..core.time import is_gregorian_leap_year
from ..core.types import DateHolder, GregorianDate
from .base import TabularCalendarSystem, normalize_month


class CivilSystem(TabularCalendarSystem):
    """The proleptic Gregorian calendar; the bridge is the identity."""

    def is_leap_year(self, year: int) -> bool:
        return is_gregorian_leap_year(year)

    def to_gregorian(self, native: DateHolder) -> GregorianDate:
        year, month = normalize_month(native.year, native.month)
        return GregorianDate(year, month, native.day)

    def from_gregorian(self, gregorian: GregorianDate) -> DateHolder:
        year, month = normalize_month(gregorian.year, gregorian.month)
        return DateHolder(year, month, gregorian.day)
