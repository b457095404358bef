"""
multical.systems.factory
------------------------
Transforms pure data specifications into live calendar-system objects.
"""

from __future__ import annotations

from ..core.types import CalendarType
from .base import TabularCalendarSystem
from .civil import CivilSystem
from .hijri import HijriSystem
from .japanese import JapaneseSystem
from .persian import PersianSystem
from .specs import SystemSpec

_SYSTEM_CLASSES = {
    CalendarType.CIVIL: CivilSystem,
    CalendarType.PERSIAN: PersianSystem,
    CalendarType.HIJRI: HijriSystem,
    CalendarType.JAPANESE: JapaneseSystem,
}


def make_system(spec: SystemSpec) -> TabularCalendarSystem:
    """The universal entry point."""
    try:
        cls = _SYSTEM_CLASSES[spec.calendar_type]
    except KeyError:
        raise TypeError(f"Unknown calendar type: {spec.calendar_type!r}") from None
    return cls(spec)
