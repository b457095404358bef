from __future__ import annotations

from .types import GregorianDate, Weekday

# Julian Day Number of 1970-01-01, the epoch of the millisecond clock.
JDN_UNIX_EPOCH = 2440588

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def to_jdn(g: GregorianDate) -> int:
    """Convert a proleptic Gregorian date (0-based month) to a Julian Day Number.

    Floor division keeps the formula valid for negative years.
    """
    y, m, day = g.year, g.month + 1, g.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn


def from_jdn(jdn: int) -> GregorianDate:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return GregorianDate(year, month - 1, day)


def day_of_week(jdn: int) -> Weekday:
    # JDN 0 is a Monday.
    return Weekday((jdn + 1) % 7 + 1)


def local_millis(jdn: int, hour_of_day: int = 0, minute: int = 0, second: int = 0, millisecond: int = 0) -> int:
    """Wall-clock milliseconds since the epoch for a local day and time of day.

    Time components are not range checked, so 25 hours spill into the next day.
    """
    return (
        (jdn - JDN_UNIX_EPOCH) * MILLIS_PER_DAY
        + hour_of_day * MILLIS_PER_HOUR
        + minute * MILLIS_PER_MINUTE
        + second * MILLIS_PER_SECOND
        + millisecond
    )


def split_local_millis(millis: int) -> tuple[int, int]:
    """Split wall-clock millis into (jdn, millis into the day)."""
    days, rem = divmod(millis, MILLIS_PER_DAY)
    return days + JDN_UNIX_EPOCH, rem
