"""multical public API.

Keep this surface small: users should mostly interact with the names re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    calendar_info,
    get_system,
    is_leap_year,
    list_calendars,
    make_system,
    month_lengths,
    register_system,
    year_length,
)
from .core.errors import ConversionDomainError, FieldRangeError, InvalidFieldError, MulticalError
from .core.types import CalendarType, DateHolder, Field, GregorianDate, Style, Weekday, field_name
from .date import CalendarDate
from .factory import from_datetime, new_instance

__all__ = [
    "CalendarDate",
    "CalendarType",
    "ConversionDomainError",
    "DateHolder",
    "Field",
    "FieldRangeError",
    "GregorianDate",
    "InvalidFieldError",
    "MulticalError",
    "Style",
    "Weekday",
    "calendar_info",
    "field_name",
    "from_datetime",
    "get_system",
    "is_leap_year",
    "list_calendars",
    "make_system",
    "month_lengths",
    "new_instance",
    "register_system",
    "year_length",
]
