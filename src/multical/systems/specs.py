from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Tuple

from ..core.types import CalendarType, Field, Weekday


@dataclass(frozen=True)
class MonthTable:
    """Month lengths of a common and a leap year, first month first."""
    normal: Tuple[int, ...]
    leap: Tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.normal) != 12 or len(self.leap) != 12:
            raise ValueError("MonthTable needs exactly 12 month lengths per year kind")

    def lengths(self, leap: bool) -> Tuple[int, ...]:
        return self.leap if leap else self.normal

    def aggregated(self, leap: bool) -> Tuple[int, ...]:
        """Days before each month; entry 12 is the year length."""
        out = [0]
        for n in self.lengths(leap):
            out.append(out[-1] + n)
        return tuple(out)


@dataclass(frozen=True)
class SystemSpec:
    """Pure data payload for constructing a calendar system."""
    calendar_type: CalendarType
    months: MonthTable
    default_locale: str
    default_first_day_of_week: Weekday
    minimum: Mapping[Field, int] = field(default_factory=dict)
    maximum: Mapping[Field, int] = field(default_factory=dict)
    least_maximum: Mapping[Field, int] = field(default_factory=dict)

    def tweak(self, **kwargs) -> "SystemSpec":
        return replace(self, **kwargs)


# ============================================================
# MONTH TABLES
# ============================================================

GREGORIAN_MONTHS = MonthTable(
    normal=(31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
    leap=(31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31),
)

PERSIAN_MONTHS = MonthTable(
    normal=(31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29),
    leap=(31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 30),
)

HIJRI_MONTHS = MonthTable(
    normal=(30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29),
    leap=(30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 30),
)


# ============================================================
# FIELD BOUNDS
# ============================================================

_MIN_COMMON: Dict[Field, int] = {
    Field.WEEK_OF_YEAR: 1,
    Field.WEEK_OF_MONTH: 0,
    Field.DAY_OF_MONTH: 1,
    Field.DAY_OF_YEAR: 1,
    Field.DAY_OF_WEEK_IN_MONTH: 1,
}

_SOLAR_MAX: Dict[Field, int] = {
    Field.WEEK_OF_YEAR: 53,
    Field.WEEK_OF_MONTH: 6,
    Field.DAY_OF_MONTH: 31,
    Field.DAY_OF_YEAR: 366,
    Field.DAY_OF_WEEK_IN_MONTH: 6,
}

_SOLAR_LEAST_MAX: Dict[Field, int] = {
    Field.WEEK_OF_YEAR: 52,
    Field.WEEK_OF_MONTH: 4,
    Field.DAY_OF_MONTH: 28,
    Field.DAY_OF_YEAR: 365,
    Field.DAY_OF_WEEK_IN_MONTH: 4,
}


# ============================================================
# SPECS
# ============================================================

CIVIL_SPEC = SystemSpec(
    calendar_type=CalendarType.CIVIL,
    months=GREGORIAN_MONTHS,
    default_locale="en",
    default_first_day_of_week=Weekday.SUNDAY,
    minimum=_MIN_COMMON,
    maximum=_SOLAR_MAX,
    least_maximum=_SOLAR_LEAST_MAX,
)

PERSIAN_SPEC = SystemSpec(
    calendar_type=CalendarType.PERSIAN,
    months=PERSIAN_MONTHS,
    default_locale="fa",
    default_first_day_of_week=Weekday.SATURDAY,
    minimum=_MIN_COMMON,
    maximum={
        Field.WEEK_OF_YEAR: 53,
        Field.WEEK_OF_MONTH: 6,
        Field.DAY_OF_MONTH: 31,
        Field.DAY_OF_YEAR: 366,
        Field.DAY_OF_WEEK_IN_MONTH: 5,
    },
    least_maximum={
        Field.WEEK_OF_YEAR: 52,
        Field.WEEK_OF_MONTH: 5,
        Field.DAY_OF_MONTH: 29,
        Field.DAY_OF_YEAR: 365,
        Field.DAY_OF_WEEK_IN_MONTH: 5,
    },
)

HIJRI_SPEC = SystemSpec(
    calendar_type=CalendarType.HIJRI,
    months=HIJRI_MONTHS,
    default_locale="ar",
    default_first_day_of_week=Weekday.SATURDAY,
    minimum=_MIN_COMMON,
    maximum={
        Field.WEEK_OF_YEAR: 52,
        Field.WEEK_OF_MONTH: 6,
        Field.DAY_OF_MONTH: 30,
        Field.DAY_OF_YEAR: 355,
        Field.DAY_OF_WEEK_IN_MONTH: 5,
    },
    least_maximum={
        Field.WEEK_OF_YEAR: 51,
        Field.WEEK_OF_MONTH: 5,
        Field.DAY_OF_MONTH: 29,
        Field.DAY_OF_YEAR: 354,
        Field.DAY_OF_WEEK_IN_MONTH: 5,
    },
)

JAPANESE_SPEC = SystemSpec(
    calendar_type=CalendarType.JAPANESE,
    months=GREGORIAN_MONTHS,
    default_locale="ja",
    default_first_day_of_week=Weekday.SUNDAY,
    minimum=_MIN_COMMON,
    maximum=_SOLAR_MAX,
    least_maximum=_SOLAR_LEAST_MAX,
)

ALL_SPECS: Dict[str, SystemSpec] = {
    spec.calendar_type.value: spec
    for spec in (CIVIL_SPEC, PERSIAN_SPEC, HIJRI_SPEC, JAPANESE_SPEC)
}
