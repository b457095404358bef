# tests/test_time.py

import random

from multical.core.time import (
    JDN_UNIX_EPOCH,
    MILLIS_PER_DAY,
    day_of_week,
    from_jdn,
    is_gregorian_leap_year,
    local_millis,
    split_local_millis,
    to_jdn,
)
from multical.core.types import GregorianDate, Weekday


def test_jdn_date_roundtrip():
    random.seed(42)
    # Wide range, well into negative astronomical years
    for _ in range(10000):
        jdn_in = random.randint(0, 5373484)
        g = from_jdn(jdn_in)
        assert 0 <= g.month <= 11
        assert to_jdn(g) == jdn_in


def test_known_epochs():
    assert to_jdn(GregorianDate(1970, 0, 1)) == JDN_UNIX_EPOCH
    assert to_jdn(GregorianDate(2000, 0, 1)) == 2451545
    assert from_jdn(2460390) == GregorianDate(2024, 2, 20)


def test_year_zero_is_leap():
    # Astronomical year 0 is 1 BC, a leap year in the proleptic Gregorian calendar
    assert is_gregorian_leap_year(0)
    assert to_jdn(GregorianDate(0, 2, 1)) - to_jdn(GregorianDate(0, 1, 1)) == 29
    assert to_jdn(GregorianDate(1, 0, 1)) - to_jdn(GregorianDate(0, 0, 1)) == 366


def test_day_of_week():
    assert day_of_week(JDN_UNIX_EPOCH) == Weekday.THURSDAY
    assert day_of_week(2460390) == Weekday.WEDNESDAY
    assert day_of_week(to_jdn(GregorianDate(2024, 0, 1))) == Weekday.MONDAY


def test_local_millis_split():
    millis = local_millis(2460390, 12, 30, 15, 250)
    jdn, rem = split_local_millis(millis)
    assert jdn == 2460390
    assert rem == ((12 * 60 + 30) * 60 + 15) * 1000 + 250

    # Lenient components spill into the next day
    jdn, rem = split_local_millis(local_millis(2460390, 25))
    assert (jdn, rem) == (2460391, 3600 * 1000)

    # Before the epoch
    jdn, rem = split_local_millis(-1)
    assert (jdn, rem) == (JDN_UNIX_EPOCH - 1, MILLIS_PER_DAY - 1)
