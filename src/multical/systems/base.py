"""
multical.systems.base
---------------------
Table-driven calendar facts shared by every system. Subclasses provide the
leap rule and the Gregorian bridge; month lengths, year lengths and
day-of-year arithmetic all follow from the SystemSpec's MonthTable.
"""

from __future__ import annotations

from typing import Mapping, Tuple

from ..core.errors import ConversionDomainError
from ..core.types import CalendarType, DateHolder, Field, GregorianDate
from .specs import SystemSpec


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """Fold a bridge month index in -11..11 into (year, 0..11).

    Negative months count back from the end of the previous year.
    """
    if month > 11 or month < -11:
        raise ConversionDomainError(f"month index {month} is outside -11..11")
    if month < 0:
        return year - 1, month + 12
    return year, month


class TabularCalendarSystem:
    def __init__(self, spec: SystemSpec):
        self.spec = spec
        self._normal_aggregated = spec.months.aggregated(False)
        self._leap_aggregated = spec.months.aggregated(True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.spec.calendar_type.value!r})"

    # ---------------------------------------------------------
    # Protocol Properties
    # ---------------------------------------------------------

    @property
    def calendar_type(self) -> CalendarType:
        return self.spec.calendar_type

    @property
    def default_first_day_of_week(self) -> int:
        return int(self.spec.default_first_day_of_week)

    @property
    def default_locale(self) -> str:
        return self.spec.default_locale

    @property
    def minimum(self) -> Mapping[Field, int]:
        return self.spec.minimum

    @property
    def maximum(self) -> Mapping[Field, int]:
        return self.spec.maximum

    @property
    def least_maximum(self) -> Mapping[Field, int]:
        return self.spec.least_maximum

    # ---------------------------------------------------------
    # Calendar facts
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        raise NotImplementedError

    def _aggregated(self, year: int) -> Tuple[int, ...]:
        return self._leap_aggregated if self.is_leap_year(year) else self._normal_aggregated

    def month_length(self, year: int, month: int) -> int:
        return self.spec.months.lengths(self.is_leap_year(year))[month]

    def year_length(self, year: int) -> int:
        return self._aggregated(year)[12]

    def day_of_year(self, year: int, month: int, day: int) -> int:
        return self._aggregated(year)[month] + day

    def date_from_day_of_year(self, year: int, day_of_year: int) -> DateHolder:
        lengths = self.spec.months.lengths(self.is_leap_year(year))
        month, day = 0, day_of_year
        while month < 11 and day > lengths[month]:
            day -= lengths[month]
            month += 1
        return DateHolder(year, month, day)

    # ---------------------------------------------------------
    # Gregorian bridge
    # ---------------------------------------------------------

    def to_gregorian(self, native: DateHolder) -> GregorianDate:
        raise NotImplementedError

    def from_gregorian(self, gregorian: GregorianDate) -> DateHolder:
        raise NotImplementedError
