"""
multical.date
-------------
CalendarDate: one point in time seen through one calendar system.

The object holds two representations at once, an absolute timestamp (epoch
milliseconds plus a time zone, kept by a GregorianClock) and the calendar
system's native (year, month, day). Every mutation path ends in `_sync()`,
which re-derives the native triple from the clock, so the two never disagree
between public calls.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime, tzinfo
from typing import Dict, Optional, Tuple, Union

from .api import resolve_system
from .core.clock import GregorianClock, ZoneLike, zone_key
from .core.errors import InvalidFieldError
from .core.types import CalendarType, DateHolder, Field, Style, Weekday, as_field
from .engines.fields import FieldArithmetic
from .names import field_strings, month_name, weekday_name
from .systems.interfaces import CalendarSystemProtocol

logger = logging.getLogger(__name__)

CalendarLike = Union[CalendarType, str, CalendarSystemProtocol]


class CalendarDate:
    """
    A mutable date in one calendar system.

    Field access follows get/set/add/roll semantics shared by every system:
    `set` and `add` carry into larger fields, `roll` wraps within the field's
    range. Months are 0-based (0..11) throughout.

    Instances are not thread-safe. A date shared between threads needs
    external locking around every call, reads included, since reads of week
    fields build scratch dates.
    """

    def __init__(
        self,
        calendar: CalendarLike = CalendarType.CIVIL,
        millis: Optional[int] = None,
        time_zone: ZoneLike = None,
        locale: Optional[str] = None,
        first_day_of_week: Optional[int] = None,
    ):
        self._system = resolve_system(calendar)
        if millis is None:
            millis = time.time_ns() // 1_000_000
        if first_day_of_week is None:
            first_day_of_week = self._system.default_first_day_of_week
        self._clock = GregorianClock(millis, time_zone, first_day_of_week)
        self._locale = locale or self._system.default_locale
        self._fields = FieldArithmetic(self)
        self._year = self._month = self._day = 0
        self._sync()

    # ---------------------------------------------------------
    # Synchronization
    # ---------------------------------------------------------

    def _sync(self) -> None:
        native = self._system.from_gregorian(self._clock.local().date)
        self._year, self._month, self._day = native.year, native.month, native.day

    def _commit(self, year: int, month: int, day: int) -> None:
        self._clock.set_local_date(self._system.to_gregorian(DateHolder(year, month, day)))
        self._sync()

    def scratch(self, year: int, month: int, day: int) -> "CalendarDate":
        """A throwaway date in this system and zone, set to the given native date."""
        from .factory import new_instance

        other = new_instance(
            self._system,
            self.time_zone,
            self._locale,
            millis=self._clock.millis,
            first_day_of_week=self.first_day_of_week,
        )
        other.set_date(year, month, day)
        return other

    # ---------------------------------------------------------
    # Field API
    # ---------------------------------------------------------

    def get(self, field: Union[int, Field]) -> int:
        return self._fields.get(field)

    def set(self, field: Union[int, Field], value: int) -> None:
        self._fields.set(field, value)

    def add(self, field: Union[int, Field], amount: int) -> None:
        self._fields.add(field, amount)

    def roll(self, field: Union[int, Field], amount: int) -> None:
        self._fields.roll(field, amount)

    def set_date(
        self,
        year: int,
        month: int,
        day_of_month: int,
        hour_of_day: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
    ) -> None:
        self._fields.set_date(year, month, day_of_month, hour_of_day, minute, second)

    def get_minimum(self, field: Union[int, Field]) -> int:
        return self._fields.get_minimum(field)

    def get_maximum(self, field: Union[int, Field]) -> int:
        return self._fields.get_maximum(field)

    def get_least_maximum(self, field: Union[int, Field]) -> int:
        return self._fields.get_least_maximum(field)

    def get_greatest_minimum(self, field: Union[int, Field]) -> int:
        return self._fields.get_greatest_minimum(field)

    def get_actual_minimum(self, field: Union[int, Field]) -> int:
        return self._fields.get_actual_minimum(field)

    def get_actual_maximum(self, field: Union[int, Field]) -> int:
        return self._fields.get_actual_maximum(field)

    # ---------------------------------------------------------
    # Field properties
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self.set(Field.YEAR, value)

    @property
    def month(self) -> int:
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        self.set(Field.MONTH, value)

    @property
    def day_of_month(self) -> int:
        return self._day

    @day_of_month.setter
    def day_of_month(self, value: int) -> None:
        self.set(Field.DAY_OF_MONTH, value)

    @property
    def day_of_year(self) -> int:
        return self.get(Field.DAY_OF_YEAR)

    @day_of_year.setter
    def day_of_year(self, value: int) -> None:
        self.set(Field.DAY_OF_YEAR, value)

    @property
    def week_of_year(self) -> int:
        return self.get(Field.WEEK_OF_YEAR)

    @week_of_year.setter
    def week_of_year(self, value: int) -> None:
        self.set(Field.WEEK_OF_YEAR, value)

    @property
    def week_of_month(self) -> int:
        return self.get(Field.WEEK_OF_MONTH)

    @week_of_month.setter
    def week_of_month(self, value: int) -> None:
        self.set(Field.WEEK_OF_MONTH, value)

    @property
    def day_of_week(self) -> int:
        return self.get(Field.DAY_OF_WEEK)

    @day_of_week.setter
    def day_of_week(self, value: int) -> None:
        self.set(Field.DAY_OF_WEEK, value)

    @property
    def day_of_week_in_month(self) -> int:
        return self.get(Field.DAY_OF_WEEK_IN_MONTH)

    @day_of_week_in_month.setter
    def day_of_week_in_month(self, value: int) -> None:
        self.set(Field.DAY_OF_WEEK_IN_MONTH, value)

    @property
    def hour(self) -> int:
        return self.get(Field.HOUR)

    @hour.setter
    def hour(self, value: int) -> None:
        self.set(Field.HOUR, value)

    @property
    def hour_of_day(self) -> int:
        return self.get(Field.HOUR_OF_DAY)

    @hour_of_day.setter
    def hour_of_day(self, value: int) -> None:
        self.set(Field.HOUR_OF_DAY, value)

    @property
    def minute(self) -> int:
        return self.get(Field.MINUTE)

    @minute.setter
    def minute(self, value: int) -> None:
        self.set(Field.MINUTE, value)

    @property
    def second(self) -> int:
        return self.get(Field.SECOND)

    @second.setter
    def second(self, value: int) -> None:
        self.set(Field.SECOND, value)

    @property
    def millisecond(self) -> int:
        return self.get(Field.MILLISECOND)

    @millisecond.setter
    def millisecond(self, value: int) -> None:
        self.set(Field.MILLISECOND, value)

    # ---------------------------------------------------------
    # Calendar facts and configuration
    # ---------------------------------------------------------

    @property
    def system(self) -> CalendarSystemProtocol:
        return self._system

    @property
    def calendar_type(self) -> CalendarType:
        return self._system.calendar_type

    @property
    def month_length(self) -> int:
        return self._system.month_length(self._year, self._month)

    @property
    def year_length(self) -> int:
        return self._system.year_length(self._year)

    @property
    def is_leap_year(self) -> bool:
        return self._system.is_leap_year(self._year)

    @property
    def locale(self) -> str:
        return self._locale

    @property
    def first_day_of_week(self) -> int:
        return int(self._clock.first_day_of_week)

    @first_day_of_week.setter
    def first_day_of_week(self, value: int) -> None:
        try:
            self._clock.first_day_of_week = Weekday(value)
        except ValueError:
            raise InvalidFieldError(f"Unknown day-of-week constant {value!r}") from None

    @property
    def time_in_millis(self) -> int:
        return self._clock.millis

    @time_in_millis.setter
    def time_in_millis(self, millis: int) -> None:
        self._clock.millis = int(millis)
        self._sync()

    @property
    def time_zone(self) -> tzinfo:
        return self._clock.tz

    @time_zone.setter
    def time_zone(self, tz: ZoneLike) -> None:
        self._clock.set_zone(tz)
        self._sync()

    # ---------------------------------------------------------
    # Names
    # ---------------------------------------------------------

    @property
    def month_name(self) -> str:
        return month_name(self.calendar_type, self._month, self._locale)

    @property
    def month_name_short(self) -> str:
        return month_name(self.calendar_type, self._month, self._locale, short=True)

    @property
    def weekday_name(self) -> str:
        return weekday_name(self.calendar_type, self.day_of_week, self._locale)

    @property
    def weekday_name_short(self) -> str:
        return weekday_name(self.calendar_type, self.day_of_week, self._locale, short=True)

    def get_display_name(self, field: Union[int, Field], style: int, locale: Optional[str] = None) -> Optional[str]:
        """Name of the field's current value, or None when the field has no names."""
        field, style = as_field(field), _as_style(style)
        names = field_strings(self.calendar_type, field, style, locale or self._locale)
        if names is None:
            return None
        return names[self.get(field)]

    def get_display_names(
        self, field: Union[int, Field], style: int, locale: Optional[str] = None
    ) -> Optional[Dict[str, int]]:
        """Map of every name of the field to its value. ALL_STYLES merges short and long forms."""
        field, style = as_field(field), _as_style(style)
        locale = locale or self._locale
        styles = (Style.SHORT, Style.LONG) if style == Style.ALL_STYLES else (style,)
        out: Dict[str, int] = {}
        for s in styles:
            names = field_strings(self.calendar_type, field, s, locale)
            if names is None:
                return None
            for value, name in enumerate(names):
                if name:
                    out[name] = value
        return out

    @property
    def short_date_string(self) -> str:
        return str(DateHolder(self._year, self._month, self._day))

    @property
    def month_day_string(self) -> str:
        return f"{self.month_name} {self._day}"

    @property
    def long_date_string(self) -> str:
        return f"{self.weekday_name}, {self._day} {self.month_name} {self._year}"

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def compare_to(self, other: "CalendarDate") -> int:
        a, b = self.time_in_millis, other.time_in_millis
        return (a > b) - (a < b)

    def before(self, other: "CalendarDate") -> bool:
        return self.compare_to(other) < 0

    def after(self, other: "CalendarDate") -> bool:
        return self.compare_to(other) > 0

    def __lt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.time_in_millis < other.time_in_millis

    def __le__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.time_in_millis <= other.time_in_millis

    def __gt__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.time_in_millis > other.time_in_millis

    def __ge__(self, other: "CalendarDate") -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self.time_in_millis >= other.time_in_millis

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def _identity(self) -> Tuple[int, str]:
        return self.time_in_millis, zone_key(self.time_zone)

    # ---------------------------------------------------------
    # Copies and conversion
    # ---------------------------------------------------------

    def clone(self) -> "CalendarDate":
        return CalendarDate(
            self._system,
            self.time_in_millis,
            self.time_zone,
            self._locale,
            self.first_day_of_week,
        )

    __copy__ = clone

    def to_calendar(self, calendar_type: Union[CalendarType, str]) -> "CalendarDate":
        """The same instant and zone in another calendar, with that calendar's defaults."""
        from .factory import new_instance

        other = new_instance(calendar_type, self.time_zone, millis=self.time_in_millis)
        logger.debug("converted %r -> %r", self, other)
        return other

    def to_civil(self) -> "CalendarDate":
        return self.to_calendar(CalendarType.CIVIL)

    def to_persian(self) -> "CalendarDate":
        return self.to_calendar(CalendarType.PERSIAN)

    def to_hijri(self) -> "CalendarDate":
        return self.to_calendar(CalendarType.HIJRI)

    def to_japanese(self) -> "CalendarDate":
        return self.to_calendar(CalendarType.JAPANESE)

    def to_datetime(self) -> datetime:
        return self._clock.to_datetime()

    def __repr__(self) -> str:
        t = self._clock.local()
        return (
            f"CalendarDate({self.calendar_type.value}, {self.short_date_string} "
            f"{t.hour_of_day:02d}:{t.minute:02d}:{t.second:02d}.{t.millisecond:03d}, "
            f"tz={zone_key(self.time_zone)})"
        )

    def __str__(self) -> str:
        return self.short_date_string


def _as_style(style: int) -> Style:
    try:
        return Style(style)
    except ValueError:
        raise InvalidFieldError(f"Unknown style {style!r}") from None
