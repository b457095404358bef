"""
multical.names.provider
-----------------------
Locale collaborator for display names. The field engine never formats
anything; it only asks for "the string for value N of field F" here.

Language selection has two branches: a locale whose language matches the
calendar's default locale gets the native table, every other locale gets the
English one.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

from ..core.errors import InvalidFieldError
from ..core.types import CalendarType, Field, Style, Weekday
from ..systems.specs import ALL_SPECS
from .tables import ALL_TABLES, NameTable

NAMED_FIELDS = (Field.ERA, Field.MONTH, Field.DAY_OF_WEEK, Field.AM_PM)


def language_of(locale: str) -> str:
    """'fa_IR' / 'fa-IR' / 'FA' -> 'fa'."""
    return locale.replace("_", "-").split("-", 1)[0].lower()


def name_table(calendar_type: Union[CalendarType, str], locale: str) -> NameTable:
    ctype = CalendarType.parse(calendar_type)
    native, other = ALL_TABLES[ctype]
    if language_of(locale) == ALL_SPECS[ctype.value].default_locale:
        return native
    return other


def _weekday_index(weekday: int) -> int:
    if weekday not in set(Weekday):
        raise InvalidFieldError(f"Unknown day-of-week constant {weekday!r}")
    # Tables are Saturday first; SATURDAY=7 lands on 0, SUNDAY=1 on 1.
    return weekday % 7


def month_name(calendar_type: Union[CalendarType, str], month: int, locale: str, *, short: bool = False) -> str:
    table = name_table(calendar_type, locale)
    return (table.short_months if short else table.months)[month]


def weekday_name(calendar_type: Union[CalendarType, str], weekday: int, locale: str, *, short: bool = False) -> str:
    table = name_table(calendar_type, locale)
    return (table.short_weekdays if short else table.weekdays)[_weekday_index(weekday)]


def field_strings(
    calendar_type: Union[CalendarType, str],
    field: Field,
    style: Style,
    locale: str,
) -> Optional[Tuple[str, ...]]:
    """Strings indexed by field value, or None for fields without names.

    Weekdays are indexed by the DAY_OF_WEEK value, so entry 0 is empty.
    Any style other than LONG selects the short forms.
    """
    table = name_table(calendar_type, locale)
    if field == Field.ERA:
        return table.eras
    if field == Field.MONTH:
        return table.months if style == Style.LONG else table.short_months
    if field == Field.DAY_OF_WEEK:
        names = table.weekdays if style == Style.LONG else table.short_weekdays
        return ("",) + tuple(names[_weekday_index(w)] for w in Weekday)
    if field == Field.AM_PM:
        return table.am_pm
    return None
