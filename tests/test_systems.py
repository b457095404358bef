# tests/test_systems.py

import random

import pytest

import multical
from multical.core.errors import ConversionDomainError
from multical.core.time import from_jdn, to_jdn
from multical.core.types import DateHolder, GregorianDate
from multical.systems.hijri import days_before_year as hijri_days_before_year
from multical.systems.persian import days_before_year as persian_days_before_year

CALENDARS = ["civil", "persian", "hijri", "japanese"]


@pytest.mark.parametrize("name", CALENDARS)
def test_year_length_matches_leap_flag(name):
    system = multical.get_system(name)
    normal = system.year_length(1) if not system.is_leap_year(1) else system.year_length(2)
    for y in range(-600, 3200):
        length = system.year_length(y)
        assert length == sum(system.month_length(y, m) for m in range(12))
        if system.is_leap_year(y):
            assert length == normal + 1
        else:
            assert length == normal


@pytest.mark.parametrize("name", CALENDARS)
def test_native_roundtrip(name):
    random.seed(7)
    system = multical.get_system(name)
    for _ in range(3000):
        y = random.randint(-3000, 4000)
        m = random.randint(0, 11)
        d = random.randint(1, system.month_length(y, m))
        native = DateHolder(y, m, d)
        assert system.from_gregorian(system.to_gregorian(native)) == native


@pytest.mark.parametrize("name", CALENDARS)
def test_gregorian_roundtrip_consecutive_days(name):
    """Consecutive Gregorian days map to consecutive native days."""
    system = multical.get_system(name)
    prev = system.from_gregorian(GregorianDate(-1, 11, 31))
    start = to_jdn(GregorianDate(0, 0, 1))
    for jdn in range(start, start + 3 * 366):
        g = from_jdn(jdn)
        native = system.from_gregorian(g)
        assert system.to_gregorian(native) == g
        if native.year == prev.year:
            assert system.day_of_year(*_ymd(native)) == system.day_of_year(*_ymd(prev)) + 1
        else:
            assert native.year == prev.year + 1
            assert (native.month, native.day) == (0, 1)
        prev = native


def _ymd(h):
    return h.year, h.month, h.day


def test_civil_and_japanese_are_identity():
    for name in ("civil", "japanese"):
        system = multical.get_system(name)
        assert system.from_gregorian(GregorianDate(2024, 1, 29)) == DateHolder(2024, 1, 29)
        assert system.to_gregorian(DateHolder(-44, 2, 15)) == GregorianDate(-44, 2, 15)


def test_persian_known_dates():
    persian = multical.get_system("persian")
    assert persian.to_gregorian(DateHolder(1403, 0, 1)) == GregorianDate(2024, 2, 20)
    assert persian.from_gregorian(GregorianDate(2024, 2, 20)) == DateHolder(1403, 0, 1)
    assert persian.from_gregorian(GregorianDate(2024, 2, 19)) == DateHolder(1402, 11, 29)
    assert persian_days_before_year(1) == 0


@pytest.mark.parametrize("year,leap", [(1395, True), (1399, True), (1402, False), (1403, False)])
def test_persian_leap_years(year, leap):
    persian = multical.get_system("persian")
    assert persian.is_leap_year(year) is leap
    assert persian.month_length(year, 11) == (30 if leap else 29)


def test_persian_cycle_boundary():
    persian = multical.get_system("persian")
    for y in (473, 474, 475, 3293, 3294, 3295, -2346, -2347):
        assert persian_days_before_year(y + 1) - persian_days_before_year(y) == persian.year_length(y)


def test_hijri_known_dates():
    hijri = multical.get_system("hijri")
    assert hijri.to_gregorian(DateHolder(1445, 8, 1)) == GregorianDate(2024, 2, 11)
    assert hijri.from_gregorian(GregorianDate(2024, 2, 11)) == DateHolder(1445, 8, 1)
    assert hijri_days_before_year(1) == 0


def test_hijri_leap_years():
    hijri = multical.get_system("hijri")
    assert hijri.is_leap_year(2)
    assert not hijri.is_leap_year(1)
    leaps = [y for y in range(1, 31) if hijri.is_leap_year(y)]
    assert leaps == [2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29]
    # Mirrored around year 0
    assert [y for y in range(-30, 0) if hijri.is_leap_year(y)] == [-y for y in reversed(leaps)]


def test_hijri_negative_year_lengths():
    hijri = multical.get_system("hijri")
    for y in range(-100, 100):
        assert hijri_days_before_year(y + 1) - hijri_days_before_year(y) == hijri.year_length(y)


def test_negative_month_borrows_from_previous_year():
    civil = multical.get_system("civil")
    persian = multical.get_system("persian")
    assert civil.to_gregorian(DateHolder(2024, -1, 5)) == GregorianDate(2023, 11, 5)
    assert persian.to_gregorian(DateHolder(1403, -1, 1)) == persian.to_gregorian(DateHolder(1402, 11, 1))


@pytest.mark.parametrize("name", CALENDARS)
@pytest.mark.parametrize("month", [12, -12, 40])
def test_month_outside_bridge_domain(name, month):
    system = multical.get_system(name)
    with pytest.raises(ConversionDomainError):
        system.to_gregorian(DateHolder(2000, month, 1))
    with pytest.raises(ConversionDomainError):
        system.from_gregorian(GregorianDate(2000, month, 1))


def test_date_from_day_of_year():
    persian = multical.get_system("persian")
    assert persian.date_from_day_of_year(1403, 1) == DateHolder(1403, 0, 1)
    assert persian.date_from_day_of_year(1403, 186) == DateHolder(1403, 5, 31)
    assert persian.date_from_day_of_year(1403, 187) == DateHolder(1403, 6, 1)
    assert persian.date_from_day_of_year(1403, 365) == DateHolder(1403, 11, 29)
