"""
multical.factory
----------------
Construction collaborator: maps a calendar type (or a live system) to a fresh
CalendarDate. The field engine builds its scratch dates through here.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Union

from .core.clock import GregorianClock, ZoneLike
from .core.types import CalendarType
from .date import CalendarDate, CalendarLike

logger = logging.getLogger(__name__)


def new_instance(
    calendar: CalendarLike = CalendarType.CIVIL,
    time_zone: ZoneLike = None,
    locale: Optional[str] = None,
    *,
    millis: Optional[int] = None,
    first_day_of_week: Optional[int] = None,
) -> CalendarDate:
    """A date in `calendar`; defaults to now, the local zone and the system's locale."""
    return CalendarDate(calendar, millis, time_zone, locale, first_day_of_week)


def from_datetime(
    dt: datetime,
    calendar: Union[CalendarType, str] = CalendarType.CIVIL,
    locale: Optional[str] = None,
) -> CalendarDate:
    """Adapt a datetime; a naive one is read in the local zone."""
    clock = GregorianClock.from_datetime(dt)
    logger.debug("from_datetime %s -> %s millis in %s", dt.isoformat(), clock.millis, calendar)
    return new_instance(calendar, clock.tz, locale, millis=clock.millis)
