# tests/test_roll.py

import random

import pytest

from multical.core.errors import InvalidFieldError
from multical.core.types import Field, Weekday


def _ymd(d):
    return d.year, d.month, d.day_of_month


@pytest.mark.parametrize(
    "start,amount,expected",
    [
        ((2024, 1, 29), 1, (2025, 1, 28)),
        ((2024, 1, 29), -1, (2023, 1, 28)),
        ((2023, 1, 28), 1, (2024, 1, 28)),
        ((2024, 1, 29), 4, (2028, 1, 29)),
    ],
)
def test_roll_year(make_date, start, amount, expected):
    d = make_date("civil", *start)
    d.roll(Field.YEAR, amount)
    assert _ymd(d) == expected


def test_roll_month_never_changes_year(make_date):
    for cal, year in (("civil", 2024), ("persian", 1403), ("hijri", 1445)):
        for k in range(-25, 26):
            d = make_date(cal, year, 4, 31 if cal == "persian" else 29)
            d.roll(Field.MONTH, k)
            assert d.year == year
            assert d.month == (4 + k) % 12


def test_roll_month_clamps(make_date):
    d = make_date("persian", 1403, 5, 31)
    d.roll(Field.MONTH, 6)
    assert _ymd(d) == (1403, 11, 29)


def test_roll_day_of_month_wraps(make_date):
    d = make_date("civil", 2024, 0, 31)
    d.roll(Field.DAY_OF_MONTH, 1)
    assert _ymd(d) == (2024, 0, 1)
    d.roll(Field.DAY_OF_MONTH, -1)
    assert _ymd(d) == (2024, 0, 31)


def test_roll_day_of_month_never_changes_month(make_date):
    random.seed(3)
    for _ in range(200):
        d = make_date("hijri", 1445, random.randint(0, 11), random.randint(1, 29))
        m = d.month
        d.roll(Field.DAY_OF_MONTH, random.randint(-100, 100))
        assert d.month == m
        assert d.year == 1445


def test_roll_day_of_year_wraps(make_date):
    d = make_date("civil", 2023, 11, 31)
    d.roll(Field.DAY_OF_YEAR, 1)
    assert _ymd(d) == (2023, 0, 1)
    d.roll(Field.DAY_OF_YEAR, -1)
    assert _ymd(d) == (2023, 11, 31)


def test_roll_day_of_week_stays_in_week(make_date):
    d = make_date("civil", 2024, 2, 16)  # Saturday, Sunday-first week
    d.roll(Field.DAY_OF_WEEK, 1)
    assert _ymd(d) == (2024, 2, 10)
    assert d.day_of_week == Weekday.SUNDAY
    d.roll(Field.DAY_OF_WEEK, 7)
    assert _ymd(d) == (2024, 2, 10)
    d.roll(Field.DAY_OF_WEEK, -1)
    assert _ymd(d) == (2024, 2, 16)


def test_roll_week_of_year_zero_is_noop(make_date):
    d = make_date("persian", 1403, 6, 12)
    before = d.time_in_millis
    w = d.get(Field.WEEK_OF_YEAR)
    d.roll(Field.WEEK_OF_YEAR, 0)
    assert d.time_in_millis == before
    assert d.get(Field.WEEK_OF_YEAR) == w


def test_roll_week_of_year_wraps_within_year(make_date):
    d = make_date("civil", 2024, 11, 31)  # Tuesday, week 53
    assert d.week_of_year == 53
    d.roll(Field.WEEK_OF_YEAR, 1)
    assert _ymd(d) == (2024, 0, 2)
    assert d.week_of_year == 1
    d.roll(Field.WEEK_OF_YEAR, -1)
    assert _ymd(d) == (2024, 11, 31)


def test_roll_week_of_year_stays_in_year(make_date):
    random.seed(5)
    for _ in range(40):
        d = make_date("hijri", 1445, random.randint(0, 11), random.randint(1, 29))
        d.roll(Field.WEEK_OF_YEAR, random.randint(-60, 60))
        assert d.year == 1445


def test_roll_week_of_month_pins_to_month(make_date):
    d = make_date("civil", 2024, 2, 30)  # Saturday, week 5 of 6
    d.roll(Field.WEEK_OF_MONTH, 1)
    assert _ymd(d) == (2024, 2, 31)
    d.roll(Field.WEEK_OF_MONTH, 1)
    assert _ymd(d) == (2024, 2, 1)
    assert d.month == 2


def test_roll_day_of_week_in_month(make_date):
    d = make_date("civil", 2024, 2, 27)  # last Wednesday
    d.roll(Field.DAY_OF_WEEK_IN_MONTH, 1)
    assert _ymd(d) == (2024, 2, 6)
    d.roll(Field.DAY_OF_WEEK_IN_MONTH, -2)
    assert _ymd(d) == (2024, 2, 20)


def test_roll_time_fields(make_date):
    d = make_date("persian", 1403, 0, 1, 22, 50)
    d.roll(Field.HOUR_OF_DAY, 5)
    assert (d.hour_of_day, _ymd(d)) == (3, (1403, 0, 1))
    d.roll(Field.MINUTE, 70)
    assert (d.hour_of_day, d.minute) == (3, 0)


def test_roll_rejects_read_only(make_date):
    d = make_date()
    with pytest.raises(InvalidFieldError):
        d.roll(Field.ZONE_OFFSET, 1)
