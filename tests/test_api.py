# tests/test_api.py

import pytest

import multical
from multical import CalendarDate, CalendarType, Weekday
from multical.core.errors import InvalidFieldError
from multical.systems.specs import CIVIL_SPEC


def test_list_calendars():
    assert set(multical.list_calendars()) >= {"civil", "hijri", "japanese", "persian"}


def test_get_system_accepts_enum_and_name():
    assert multical.get_system(CalendarType.HIJRI) is multical.get_system(" Hijri ")
    with pytest.raises(KeyError):
        multical.get_system("mayan")


def test_calendar_type_parse():
    assert CalendarType.parse("PERSIAN") is CalendarType.PERSIAN
    with pytest.raises(InvalidFieldError):
        CalendarType.parse("mayan")


def test_calendar_info():
    info = multical.calendar_info("persian")
    assert info["calendar_type"] == "persian"
    assert info["default_locale"] == "fa"
    assert info["default_first_day_of_week"] == Weekday.SATURDAY
    assert info["maximum"]["DAY_OF_WEEK_IN_MONTH"] == 5


def test_year_helpers():
    assert multical.is_leap_year(2024)
    assert multical.year_length(1399, calendar="persian") == 366
    assert multical.month_lengths(2, calendar="hijri")[-1] == 30


def test_register_tweaked_system():
    spec = CIVIL_SPEC.tweak(default_first_day_of_week=Weekday.MONDAY, default_locale="de")
    system = multical.make_system(spec)
    multical.register_system("civil-monday", system, overwrite=True)
    with pytest.raises(KeyError):
        multical.register_system("civil-monday", system)

    d = CalendarDate("civil-monday", 0, "UTC")
    assert d.first_day_of_week == Weekday.MONDAY
    assert d.locale == "de"
    assert d.calendar_type == CalendarType.CIVIL
    assert d.month_name == "January"
