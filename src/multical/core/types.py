from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Union

from .errors import InvalidFieldError


class Field(IntEnum):
    ERA = 0
    YEAR = 1
    MONTH = 2
    WEEK_OF_YEAR = 3
    WEEK_OF_MONTH = 4
    DAY_OF_MONTH = 5
    DAY_OF_YEAR = 6
    DAY_OF_WEEK = 7
    DAY_OF_WEEK_IN_MONTH = 8
    AM_PM = 9
    HOUR = 10
    HOUR_OF_DAY = 11
    MINUTE = 12
    SECOND = 13
    MILLISECOND = 14
    ZONE_OFFSET = 15
    DST_OFFSET = 16


# Fields that get/set/add/roll accept. ZONE_OFFSET and DST_OFFSET are read-only.
SETTABLE_FIELDS = frozenset(f for f in Field if f <= Field.MILLISECOND)


class Weekday(IntEnum):
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


class Style(IntEnum):
    ALL_STYLES = 0
    SHORT = 1
    LONG = 2


class CalendarType(str, Enum):
    CIVIL = "civil"
    PERSIAN = "persian"
    HIJRI = "hijri"
    JAPANESE = "japanese"

    @classmethod
    def parse(cls, value: Union[str, "CalendarType"]) -> "CalendarType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidFieldError(
                f"Unknown calendar type '{value}'. Available: {[t.value for t in cls]}"
            ) from None


def as_field(field: Union[int, Field]) -> Field:
    """Coerce an int field code to Field, raising InvalidFieldError if unknown."""
    try:
        return Field(field)
    except ValueError:
        raise InvalidFieldError(f"Unknown field index {field!r}") from None


def field_name(field: Union[int, Field]) -> str:
    return as_field(field).name


@dataclass(frozen=True)
class DateHolder:
    """A calendar system's own (year, month 0..11, day) triple."""
    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year}/{self.month + 1:02d}/{self.day:02d}"


@dataclass(frozen=True)
class GregorianDate(DateHolder):
    """Proleptic Gregorian triple used as the interchange form between systems.

    Years are astronomical: 0 is 1 BC, -1 is 2 BC.
    """
