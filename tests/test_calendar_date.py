# tests/test_calendar_date.py

import copy
from datetime import datetime, timezone
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

import multical
from multical import CalendarDate, CalendarType, Field, Weekday
from multical.core.errors import FieldRangeError, InvalidFieldError

DAY = 24 * 3600 * 1000
# 2024-03-20T00:00Z, Nowruz 1403
NOWRUZ_1403 = 19802 * DAY


def _ymd(d):
    return d.year, d.month, d.day_of_month


def test_native_fields_follow_timestamp():
    d = multical.new_instance("persian", "UTC", millis=NOWRUZ_1403)
    assert _ymd(d) == (1403, 0, 1)
    assert d.calendar_type == CalendarType.PERSIAN

    d.time_in_millis = NOWRUZ_1403 - DAY
    assert _ymd(d) == (1402, 11, 29)


def test_timestamp_follows_field_changes():
    d = multical.new_instance("hijri", "UTC", millis=NOWRUZ_1403)
    d.set_date(1445, 8, 1)
    assert d.time_in_millis == NOWRUZ_1403 - 9 * DAY
    assert d.to_civil().short_date_string == "2024/03/11"


def test_time_zone_change_keeps_instant():
    d = multical.new_instance("civil", "UTC", millis=NOWRUZ_1403 - 3600 * 1000)  # 23:00 on the 19th
    assert _ymd(d) == (2024, 2, 19)
    d.time_zone = "Asia/Tokyo"
    assert d.time_in_millis == NOWRUZ_1403 - 3600 * 1000
    assert _ymd(d) == (2024, 2, 20)
    assert d.hour_of_day == 8


def test_defaults_per_calendar():
    with patch("multical.core.clock.get_localzone") as mock:
        mock.return_value = ZoneInfo("UTC")
        p = CalendarDate("persian")
        c = CalendarDate()
    assert p.locale == "fa"
    assert p.first_day_of_week == Weekday.SATURDAY
    assert c.locale == "en"
    assert c.first_day_of_week == Weekday.SUNDAY
    assert c.calendar_type == CalendarType.CIVIL
    assert p.time_zone == ZoneInfo("UTC")


def test_now_is_default_time():
    with patch("multical.date.time.time_ns") as mock:
        mock.return_value = NOWRUZ_1403 * 1_000_000
        d = CalendarDate("hijri", time_zone="UTC")
    assert d.time_in_millis == NOWRUZ_1403
    assert d.short_date_string == "1445/09/10"


def test_conversions(make_date):
    c = make_date("civil", 2024, 2, 20, 15, 45)
    p = c.to_persian()
    h = c.to_hijri()
    j = c.to_japanese()
    assert p.short_date_string == "1403/01/01"
    assert h.short_date_string == "1445/09/10"
    assert j.short_date_string == "2024/03/20"
    for other in (p, h, j):
        assert other.time_in_millis == c.time_in_millis
        assert other.hour_of_day == 15
    assert p.to_calendar("civil") == c
    assert p.locale == "fa"


def test_properties_round_trip(make_date):
    d = make_date("civil", 2024, 1, 29, 9, 5, 7)
    assert (d.hour, d.minute, d.second, d.millisecond) == (9, 5, 7, 0)
    assert d.month_length == 29
    assert d.year_length == 366
    assert d.is_leap_year
    assert d.day_of_year == 60

    d.year = 2023
    assert _ymd(d) == (2023, 1, 28)
    d.month = 2
    d.day_of_month = 31
    assert _ymd(d) == (2023, 2, 31)
    d.hour_of_day = 13
    assert (d.hour, d.get(Field.AM_PM)) == (1, 1)
    d.millisecond = 250
    assert d.time_in_millis % 1000 == 250


def test_bounds(make_date):
    p = make_date("persian", 1403, 11, 1)
    assert p.get_maximum(Field.DAY_OF_MONTH) == 31
    assert p.get_least_maximum(Field.DAY_OF_MONTH) == 29
    assert p.get_actual_maximum(Field.DAY_OF_MONTH) == 29
    assert p.get_actual_maximum(Field.DAY_OF_YEAR) == 365
    assert p.get_maximum(Field.DAY_OF_WEEK_IN_MONTH) == 5
    assert p.get_greatest_minimum(Field.DAY_OF_MONTH) == p.get_minimum(Field.DAY_OF_MONTH) == 1
    assert p.get_actual_minimum(Field.DAY_OF_YEAR) == 1

    h = make_date("hijri", 2, 0, 1)
    assert h.get_maximum(Field.DAY_OF_YEAR) == 355
    assert h.get_actual_maximum(Field.DAY_OF_YEAR) == 355
    assert h.get_maximum(Field.HOUR_OF_DAY) == 23

    c = make_date("civil", 2024, 1, 10)
    assert c.get_actual_maximum(Field.DAY_OF_MONTH) == 29
    assert c.get_actual_maximum(Field.DAY_OF_WEEK_IN_MONTH) == 5
    assert c.get_actual_maximum(Field.WEEK_OF_YEAR) == 53
    assert c.get_maximum(Field.YEAR) == 292278994


def test_failed_mutation_leaves_state(make_date):
    d = make_date("hijri", 1445, 8, 1, 6)
    snapshot = (d.time_in_millis, _ymd(d))
    with pytest.raises(FieldRangeError):
        d.year = 10 ** 10
    with pytest.raises(FieldRangeError):
        d.set(Field.ERA, 5)
    with pytest.raises(InvalidFieldError):
        d.roll(Field.DST_OFFSET, 1)
    assert (d.time_in_millis, _ymd(d)) == snapshot


def test_era_and_negative_years(make_date):
    d = make_date("civil", -100, 0, 1)
    assert d.year == -100
    assert d.get(Field.ERA) == 0
    assert d.short_date_string == "-100/01/01"
    d.add(Field.YEAR, 101)
    assert d.get(Field.ERA) == 1


def test_comparison_uses_timestamp_only(make_date):
    a = make_date("civil", 2024, 2, 20)
    b = a.to_persian()
    b.time_zone = "Asia/Tehran"
    c = make_date("hijri", 1445, 8, 11)

    assert a.compare_to(b) == 0
    assert a != b  # same instant, different zones
    assert a <= b and a >= b
    assert a.before(c) and c.after(a)
    assert a < c and c > a
    assert sorted([c, a]) == [a, c]


def test_equality_and_hash(make_date):
    a = make_date("civil", 2024, 2, 20)
    b = a.to_hijri()
    assert a == b
    assert hash(a) == hash(b)
    assert a != "2024/03/20"


def test_clone_is_independent(make_date):
    a = make_date("persian", 1403, 0, 1, first_day_of_week=Weekday.MONDAY, locale="en")
    b = a.clone()
    c = copy.copy(a)
    assert b == a and c == a
    assert b.first_day_of_week == Weekday.MONDAY
    assert b.locale == "en"

    b.add(Field.DAY_OF_MONTH, 1)
    assert _ymd(a) == (1403, 0, 1)
    assert _ymd(b) == (1403, 0, 2)


def test_first_day_of_week_setter(make_date):
    d = make_date("civil", 2024, 0, 7)
    assert d.week_of_year == 2
    d.first_day_of_week = Weekday.MONDAY
    assert d.week_of_year == 1
    with pytest.raises(InvalidFieldError):
        d.first_day_of_week = 9


def test_datetime_interop():
    dt = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)
    d = multical.from_datetime(dt, "persian")
    assert _ymd(d) == (1403, 0, 1)
    assert d.to_datetime() == dt


def test_registered_system_object_is_accepted():
    system = multical.get_system("hijri")
    d = CalendarDate(system, 0, "UTC")
    assert d.system is system
    assert "hijri" in repr(d)
