from .base import TabularCalendarSystem
from .civil import CivilSystem
from .factory import make_system
from .hijri import HijriSystem
from .interfaces import CalendarSystemProtocol
from .japanese import JapaneseSystem
from .persian import PersianSystem
from .specs import ALL_SPECS, MonthTable, SystemSpec

__all__ = [
    "ALL_SPECS",
    "CalendarSystemProtocol",
    "CivilSystem",
    "HijriSystem",
    "JapaneseSystem",
    "MonthTable",
    "PersianSystem",
    "SystemSpec",
    "TabularCalendarSystem",
    "make_system",
]
