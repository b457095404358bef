from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from .core.registry import SystemRegistry
from .core.types import CalendarType
from .systems.factory import make_system as _make_system
from .systems.interfaces import CalendarSystemProtocol
from .systems.specs import SystemSpec

_registry: Optional[SystemRegistry] = None


def set_registry(reg: SystemRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> SystemRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry


def list_calendars() -> List[str]:
    return _reg().list()


def get_system(name: Union[CalendarType, str]) -> CalendarSystemProtocol:
    if isinstance(name, CalendarType):
        name = name.value
    return _reg().get(str(name).strip().lower())


def resolve_system(calendar: Union[CalendarType, str, CalendarSystemProtocol]) -> CalendarSystemProtocol:
    """Accept a registered name, a CalendarType or a live system object."""
    if isinstance(calendar, (CalendarType, str)):
        return get_system(calendar)
    return calendar


def make_system(spec: SystemSpec) -> CalendarSystemProtocol:
    return _make_system(spec)


def register_system(name: str, system: CalendarSystemProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, system, overwrite=overwrite)


def calendar_info(name: Union[CalendarType, str]) -> Dict[str, Any]:
    system = get_system(name)
    return {
        "calendar_type": system.calendar_type.value,
        "default_locale": system.default_locale,
        "default_first_day_of_week": system.default_first_day_of_week,
        "minimum": {f.name: v for f, v in system.minimum.items()},
        "maximum": {f.name: v for f, v in system.maximum.items()},
        "least_maximum": {f.name: v for f, v in system.least_maximum.items()},
    }


# ============================================================
# Year-level helpers
# ============================================================

def is_leap_year(year: int, *, calendar: Union[CalendarType, str] = CalendarType.CIVIL) -> bool:
    return get_system(calendar).is_leap_year(year)


def year_length(year: int, *, calendar: Union[CalendarType, str] = CalendarType.CIVIL) -> int:
    return get_system(calendar).year_length(year)


def month_lengths(year: int, *, calendar: Union[CalendarType, str] = CalendarType.CIVIL) -> List[int]:
    system = get_system(calendar)
    return [system.month_length(year, m) for m in range(12)]
