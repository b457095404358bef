"""
multical.core.clock
-------------------
The absolute-time side of a date: milliseconds since 1970-01-01T00:00Z paired
with a time zone. Local wall-clock fields are broken down on the proleptic
Gregorian calendar through Julian Day Numbers, so years outside the range of
``datetime`` still work; the zone offset for such years is taken from the
nearest representable instant.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Dict, NamedTuple, Optional, Union

from tzlocal import get_localzone
from zoneinfo import ZoneInfo

from .errors import FieldRangeError, InvalidFieldError
from .time import (
    MILLIS_PER_DAY,
    MILLIS_PER_HOUR,
    MILLIS_PER_MINUTE,
    MILLIS_PER_SECOND,
    day_of_week,
    from_jdn,
    is_gregorian_leap_year,
    local_millis,
    split_local_millis,
    to_jdn,
)
from .types import Field, GregorianDate, Weekday

logger = logging.getLogger(__name__)

ZoneLike = Union[tzinfo, str, None]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Keep a day of slack on both ends so astimezone() never leaves datetime's range.
_MIN_UTC_MILLIS = int((datetime(1, 1, 2, tzinfo=timezone.utc) - _EPOCH).total_seconds()) * 1000
_MAX_UTC_MILLIS = int((datetime(9999, 12, 30, tzinfo=timezone.utc) - _EPOCH).total_seconds()) * 1000

_GREGORIAN_MONTH_LENGTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Gregorian defaults used whenever a calendar system has no override.
MINIMUM: Dict[Field, int] = {
    Field.ERA: 0,
    Field.YEAR: -292275055,
    Field.MONTH: 0,
    Field.WEEK_OF_YEAR: 1,
    Field.WEEK_OF_MONTH: 0,
    Field.DAY_OF_MONTH: 1,
    Field.DAY_OF_YEAR: 1,
    Field.DAY_OF_WEEK: 1,
    Field.DAY_OF_WEEK_IN_MONTH: -1,
    Field.AM_PM: 0,
    Field.HOUR: 0,
    Field.HOUR_OF_DAY: 0,
    Field.MINUTE: 0,
    Field.SECOND: 0,
    Field.MILLISECOND: 0,
    Field.ZONE_OFFSET: -13 * MILLIS_PER_HOUR,
    Field.DST_OFFSET: 0,
}

MAXIMUM: Dict[Field, int] = {
    Field.ERA: 1,
    Field.YEAR: 292278994,
    Field.MONTH: 11,
    Field.WEEK_OF_YEAR: 53,
    Field.WEEK_OF_MONTH: 6,
    Field.DAY_OF_MONTH: 31,
    Field.DAY_OF_YEAR: 366,
    Field.DAY_OF_WEEK: 7,
    Field.DAY_OF_WEEK_IN_MONTH: 6,
    Field.AM_PM: 1,
    Field.HOUR: 11,
    Field.HOUR_OF_DAY: 23,
    Field.MINUTE: 59,
    Field.SECOND: 59,
    Field.MILLISECOND: 999,
    Field.ZONE_OFFSET: 14 * MILLIS_PER_HOUR,
    Field.DST_OFFSET: 2 * MILLIS_PER_HOUR,
}

LEAST_MAXIMUM: Dict[Field, int] = {
    **MAXIMUM,
    Field.YEAR: 292269054,
    Field.WEEK_OF_YEAR: 52,
    Field.WEEK_OF_MONTH: 4,
    Field.DAY_OF_MONTH: 28,
    Field.DAY_OF_YEAR: 365,
    Field.DAY_OF_WEEK_IN_MONTH: 4,
    Field.DST_OFFSET: 20 * MILLIS_PER_MINUTE,
}


def resolve_zone(tz: ZoneLike) -> tzinfo:
    """Accept a tzinfo, an IANA zone name, or None for the local zone."""
    if tz is None:
        return get_localzone()
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def zone_key(tz: tzinfo) -> str:
    return getattr(tz, "key", None) or str(tz)


def gregorian_month_length(year: int, month: int) -> int:
    if month == 1 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_LENGTH[month]


def _ms(delta: Optional[timedelta]) -> int:
    if delta is None:
        return 0
    return (delta.days * 86400 + delta.seconds) * MILLIS_PER_SECOND + delta.microseconds // 1000


class LocalTime(NamedTuple):
    jdn: int
    date: GregorianDate
    hour_of_day: int
    minute: int
    second: int
    millisecond: int
    zone_offset: int
    dst_offset: int


class GregorianClock:
    """
    Absolute time plus zone with lenient Gregorian field access.

    Setting a time field to an out-of-range value carries into the larger
    fields (HOUR_OF_DAY=25 is 01:00 of the next day).
    """

    def __init__(self, millis: int, tz: ZoneLike = None, first_day_of_week: int = Weekday.SUNDAY):
        self.millis = int(millis)
        self.tz = resolve_zone(tz)
        self.first_day_of_week = Weekday(first_day_of_week)

    def copy(self) -> "GregorianClock":
        return GregorianClock(self.millis, self.tz, self.first_day_of_week)

    def set_zone(self, tz: ZoneLike) -> None:
        self.tz = resolve_zone(tz)
        logger.debug("clock zone set to %s", zone_key(self.tz))

    # ---------------------------------------------------------
    # Local <-> UTC
    # ---------------------------------------------------------

    def _offsets(self, utc_millis: int) -> tuple[int, int]:
        clamped = min(max(utc_millis, _MIN_UTC_MILLIS), _MAX_UTC_MILLIS)
        local = (_EPOCH + timedelta(milliseconds=clamped)).astimezone(self.tz)
        total = _ms(local.utcoffset())
        dst = _ms(local.dst())
        return total - dst, dst

    def _wall_offset(self, wall_millis: int) -> int:
        jdn, rem = split_local_millis(wall_millis)
        g = from_jdn(jdn)
        if g.year < 1:
            naive = datetime(1, 1, 2)
        elif g.year > 9999:
            naive = datetime(9999, 12, 30)
        else:
            naive = datetime(g.year, g.month + 1, g.day) + timedelta(milliseconds=rem)
        return _ms(naive.replace(tzinfo=self.tz).utcoffset())

    def local(self) -> LocalTime:
        zone, dst = self._offsets(self.millis)
        jdn, rem = split_local_millis(self.millis + zone + dst)
        hour, rem = divmod(rem, MILLIS_PER_HOUR)
        minute, rem = divmod(rem, MILLIS_PER_MINUTE)
        second, millisecond = divmod(rem, MILLIS_PER_SECOND)
        return LocalTime(jdn, from_jdn(jdn), hour, minute, second, millisecond, zone, dst)

    def _set_wall(self, jdn: int, hour_of_day: int, minute: int, second: int, millisecond: int) -> None:
        wall = local_millis(jdn, hour_of_day, minute, second, millisecond)
        self.millis = wall - self._wall_offset(wall)

    # ---------------------------------------------------------
    # Date-level mutation used by the field engine
    # ---------------------------------------------------------

    def set_local_date(self, g: GregorianDate) -> None:
        """Move to a local Gregorian date, keeping the wall-clock time of day."""
        t = self.local()
        self._set_wall(to_jdn(g), t.hour_of_day, t.minute, t.second, t.millisecond)

    def add_days(self, amount: int) -> None:
        if amount == 0:
            return
        t = self.local()
        self._set_wall(t.jdn + amount, t.hour_of_day, t.minute, t.second, t.millisecond)

    def adjust_day_of_week_offset(self, dow: int) -> int:
        return (dow - self.first_day_of_week + 7) % 7

    # ---------------------------------------------------------
    # Field access
    # ---------------------------------------------------------

    def get(self, field: Field) -> int:
        t = self.local()
        if field == Field.ERA:
            return 1 if t.date.year >= 1 else 0
        if field == Field.YEAR:
            return t.date.year
        if field == Field.MONTH:
            return t.date.month
        if field == Field.DAY_OF_MONTH:
            return t.date.day
        if field == Field.DAY_OF_YEAR:
            return t.jdn - to_jdn(GregorianDate(t.date.year, 0, 1)) + 1
        if field == Field.DAY_OF_WEEK:
            return int(day_of_week(t.jdn))
        if field == Field.AM_PM:
            return t.hour_of_day // 12
        if field == Field.HOUR:
            return t.hour_of_day % 12
        if field == Field.HOUR_OF_DAY:
            return t.hour_of_day
        if field == Field.MINUTE:
            return t.minute
        if field == Field.SECOND:
            return t.second
        if field == Field.MILLISECOND:
            return t.millisecond
        if field == Field.ZONE_OFFSET:
            return t.zone_offset
        if field == Field.DST_OFFSET:
            return t.dst_offset
        raise InvalidFieldError(f"{field.name} is not served by the clock")

    def set(self, field: Field, value: int) -> None:
        t = self.local()
        h, mi, s, ms = t.hour_of_day, t.minute, t.second, t.millisecond

        if field == Field.ERA:
            if value not in (0, 1):
                raise FieldRangeError(field, value, MINIMUM[field], MAXIMUM[field])
            era = 1 if t.date.year >= 1 else 0
            if value != era:
                year = 1 - t.date.year
                day = min(t.date.day, gregorian_month_length(year, t.date.month))
                self.set_local_date(GregorianDate(year, t.date.month, day))
            return
        if field == Field.DAY_OF_WEEK:
            # Lenient: 8 is the Sunday of the following week.
            weeks, base = divmod(value - 1, 7)
            week_start = t.jdn - self.adjust_day_of_week_offset(int(day_of_week(t.jdn)))
            target = week_start + self.adjust_day_of_week_offset(base + 1) + 7 * weeks
            self._set_wall(target, h, mi, s, ms)
            return

        if field == Field.AM_PM:
            h = value * 12 + h % 12
        elif field == Field.HOUR:
            h = (h // 12) * 12 + value
        elif field == Field.HOUR_OF_DAY:
            h = value
        elif field == Field.MINUTE:
            mi = value
        elif field == Field.SECOND:
            s = value
        elif field == Field.MILLISECOND:
            ms = value
        else:
            raise InvalidFieldError(f"{field.name} cannot be set on the clock")
        self._set_wall(t.jdn, h, mi, s, ms)

    def roll(self, field: Field, amount: int) -> None:
        t = self.local()
        h, mi, s, ms = t.hour_of_day, t.minute, t.second, t.millisecond

        if field == Field.ERA:
            if amount % 2:
                self.set(Field.ERA, 0 if t.date.year >= 1 else 1)
            return
        if field == Field.AM_PM:
            if amount % 2:
                h = (h + 12) % 24
        elif field == Field.HOUR:
            h = (h // 12) * 12 + (h % 12 + amount) % 12
        elif field == Field.HOUR_OF_DAY:
            h = (h + amount) % 24
        elif field == Field.MINUTE:
            mi = (mi + amount) % 60
        elif field == Field.SECOND:
            s = (s + amount) % 60
        elif field == Field.MILLISECOND:
            ms = (ms + amount) % 1000
        else:
            raise InvalidFieldError(f"{field.name} cannot be rolled on the clock")
        self._set_wall(t.jdn, h, mi, s, ms)

    def to_datetime(self) -> datetime:
        """Aware datetime for this instant; only valid inside datetime's year range."""
        return (_EPOCH + timedelta(milliseconds=self.millis)).astimezone(self.tz)

    @classmethod
    def from_datetime(cls, dt: datetime, first_day_of_week: int = Weekday.SUNDAY) -> "GregorianClock":
        tz = dt.tzinfo if dt.tzinfo is not None else get_localzone()
        aware = dt if dt.tzinfo is not None else dt.replace(tzinfo=tz)
        millis = _ms(aware - _EPOCH)
        return cls(millis, tz, first_day_of_week)
