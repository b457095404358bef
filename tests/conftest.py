import pytest

import multical


@pytest.fixture
def make_date():
    """Build a UTC date at a native (year, 0-based month, day) and time of day."""
    def _make(calendar="civil", year=2024, month=0, day=1, hour=0, minute=0, second=0,
              first_day_of_week=None, locale=None):
        d = multical.new_instance(calendar, "UTC", locale, millis=0, first_day_of_week=first_day_of_week)
        d.set_date(year, month, day, hour, minute, second)
        return d
    return _make
