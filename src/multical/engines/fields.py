"""
multical.engines.fields
-----------------------
Calendar-agnostic field arithmetic. Every get/set/add/roll on a CalendarDate
lands here and is answered from the date's cached native (year, month, day)
plus the month/year lengths of its calendar system.

Native fields (YEAR, MONTH, DAY_OF_MONTH, DAY_OF_YEAR and the week fields)
are computed on the native triple and committed back through the system's
Gregorian bridge. ERA, DAY_OF_WEEK and time-of-day fields belong to the
absolute-time clock and are delegated to it.

Week numbering: with `base` the first day of the period (year or month)
expressed as an offset from the first day of the week,

    week(day) = (base + day) // 7 + (1 if (base + day) % 7 else 0)

so week 1 starts on the first occurrence of the first day of the week at or
before day 1.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple, Union

from ..core import clock as _clock
from ..core.errors import FieldRangeError, InvalidFieldError
from ..core.types import SETTABLE_FIELDS, Field, as_field

if TYPE_CHECKING:
    from ..date import CalendarDate
    from ..systems.interfaces import CalendarSystemProtocol

FieldLike = Union[int, Field]

# Fields whose add() is a plain shift by days (DAY_OF_WEEK) or weeks (the rest).
_DAY_SHIFT_FIELDS = {
    Field.DAY_OF_WEEK: 1,
    Field.WEEK_OF_YEAR: 7,
    Field.WEEK_OF_MONTH: 7,
    Field.DAY_OF_WEEK_IN_MONTH: 7,
}


def _settable(field: FieldLike) -> Field:
    f = as_field(field)
    if f not in SETTABLE_FIELDS:
        raise InvalidFieldError(f"{f.name} is read-only")
    return f


def week_number(day: int, base_offset: int) -> int:
    dividend, remainder = divmod(base_offset + day, 7)
    return dividend + (1 if remainder > 0 else 0)


def day_of_week_in_month(day: int) -> int:
    return (day - 1) // 7 + 1


class FieldArithmetic:
    """Field engine bound to one CalendarDate."""

    def __init__(self, date: "CalendarDate"):
        self.date = date

    @property
    def system(self) -> "CalendarSystemProtocol":
        return self.date.system

    @property
    def clock(self) -> _clock.GregorianClock:
        return self.date._clock

    def _native(self) -> Tuple[int, int, int]:
        return self.date._year, self.date._month, self.date._day

    def _commit(self, year: int, month: int, day: int) -> None:
        self.date._commit(year, month, day)

    def _adopt(self, other: "CalendarDate") -> None:
        self._commit(other.year, other.month, other.day_of_month)

    # ---------------------------------------------------------
    # Week numbering
    # ---------------------------------------------------------

    def adjust_day_of_week_offset(self, day_of_week: int) -> int:
        return (day_of_week - self.date.first_day_of_week + 7) % 7

    def _anchor_offset(self, anchor: "CalendarDate") -> int:
        return self.adjust_day_of_week_offset(anchor.get(Field.DAY_OF_WEEK))

    def week_of_month(self) -> int:
        y, m, d = self._native()
        base = self.date.scratch(y, m, 1)
        return week_number(d, self._anchor_offset(base))

    def week_of_year(self) -> int:
        y, m, d = self._native()
        base = self.date.scratch(y, 0, 1)
        return week_number(self.system.day_of_year(y, m, d), self._anchor_offset(base))

    # ---------------------------------------------------------
    # get
    # ---------------------------------------------------------

    def get(self, field: FieldLike) -> int:
        field = as_field(field)
        y, m, d = self._native()
        if field == Field.YEAR:
            return y
        if field == Field.MONTH:
            return m
        if field == Field.DAY_OF_MONTH:
            return d
        if field == Field.DAY_OF_YEAR:
            return self.system.day_of_year(y, m, d)
        if field == Field.WEEK_OF_YEAR:
            return self.week_of_year()
        if field == Field.WEEK_OF_MONTH:
            return self.week_of_month()
        if field == Field.DAY_OF_WEEK_IN_MONTH:
            return day_of_week_in_month(d)
        return self.clock.get(field)

    # ---------------------------------------------------------
    # set
    # ---------------------------------------------------------

    def set(self, field: FieldLike, value: int) -> None:
        field = _settable(field)
        y, m, d = self._native()

        if field == Field.YEAR:
            lo, hi = self.get_minimum(field), self.get_maximum(field)
            if not lo <= value <= hi:
                raise FieldRangeError(field, value, lo, hi)
            self._commit(value, m, min(d, self.system.month_length(value, m)))

        elif field == Field.MONTH:
            carry, month = divmod(value, 12)
            year = y + carry
            self._commit(year, month, min(d, self.system.month_length(year, month)))

        elif field == Field.DAY_OF_MONTH:
            lo, hi = self.get_actual_minimum(field), self.get_actual_maximum(field)
            if lo <= value <= hi:
                self._commit(y, m, value)
            else:
                limit = lo if value < lo else hi
                self._commit(y, m, limit)
                self._carry_days(value - limit)

        elif field == Field.DAY_OF_YEAR:
            lo, hi = self.get_actual_minimum(field), self.get_actual_maximum(field)
            limit = min(max(value, lo), hi)
            h = self.system.date_from_day_of_year(y, limit)
            self._commit(h.year, h.month, h.day)
            if limit != value:
                self._carry_days(value - limit)

        elif field in (Field.WEEK_OF_YEAR, Field.WEEK_OF_MONTH):
            base = self.date.scratch(y, 0 if field == Field.WEEK_OF_YEAR else m, 1)
            dow = self.adjust_day_of_week_offset(self.get(Field.DAY_OF_WEEK))
            move = (value - 1) * 7 + (dow - self._anchor_offset(base))
            if value >= 1 and move < 0:
                # The weekday does not occur in the period's first week; stay on its first day.
                move = 0
            base.add(Field.DAY_OF_MONTH, move)
            self._adopt(base)

        elif field == Field.DAY_OF_WEEK_IN_MONTH:
            self._set_day_of_week_in_month(value)

        else:
            self.clock.set(field, value)
            self.date._sync()

    def _carry_days(self, amount: int) -> None:
        self.clock.add_days(amount)
        self.date._sync()

    def _set_day_of_week_in_month(self, value: int) -> None:
        y, m, d = self._native()
        dow = self.adjust_day_of_week_offset(self.get(Field.DAY_OF_WEEK))

        if value > 0:
            base = self.date.scratch(y, m, d)
            move = (value - day_of_week_in_month(d)) * 7
        elif value == 0:
            # The same weekday in the week before its first occurrence this month.
            base = self.date.scratch(y, m, 1)
            move = dow - self._anchor_offset(base)
            if move >= 0:
                move -= 7
        else:
            # -1 is the last occurrence in the month, -2 the one before it.
            base = self.date.scratch(y, m, self.system.month_length(y, m))
            diff = dow - self._anchor_offset(base)
            if diff < 0:
                move = diff
            elif diff > 0:
                move = diff - 7
            else:
                move = 0
            move += 7 * (value + 1)

        base.add(Field.DAY_OF_MONTH, move)
        self._adopt(base)

    def set_date(
        self,
        year: int,
        month: int,
        day_of_month: int,
        hour_of_day: Optional[int] = None,
        minute: Optional[int] = None,
        second: Optional[int] = None,
    ) -> None:
        """Set the native date at once: month carries into the year, the day is clamped then carried."""
        lo, hi = self.get_minimum(Field.YEAR), self.get_maximum(Field.YEAR)
        if not lo <= year <= hi:
            raise FieldRangeError(Field.YEAR, year, lo, hi)

        carry, month = divmod(month, 12)
        year += carry

        day_max = self.system.month_length(year, month)
        day = min(max(day_of_month, 1), day_max)
        self._commit(year, month, day)
        if day != day_of_month:
            self._carry_days(day_of_month - day)

        for field, value in (
            (Field.HOUR_OF_DAY, hour_of_day),
            (Field.MINUTE, minute),
            (Field.SECOND, second),
        ):
            if value is not None:
                self.clock.set(field, value)
        self.date._sync()

    # ---------------------------------------------------------
    # add
    # ---------------------------------------------------------

    def add(self, field: FieldLike, amount: int) -> None:
        field = _settable(field)
        if amount == 0:
            return
        if field in _DAY_SHIFT_FIELDS:
            amount *= _DAY_SHIFT_FIELDS[field]
            field = Field.DAY_OF_MONTH
        self.set(field, self.get(field) + amount)

    # ---------------------------------------------------------
    # roll
    # ---------------------------------------------------------

    def roll(self, field: FieldLike, amount: int) -> None:
        field = _settable(field)
        if amount == 0:
            return
        y, m, d = self._native()

        if field == Field.YEAR:
            year = y + amount
            self._commit(year, m, min(d, self.system.month_length(year, m)))

        elif field == Field.MONTH:
            month = (m + amount) % 12
            self._commit(y, month, min(d, self.system.month_length(y, month)))

        elif field == Field.DAY_OF_MONTH:
            length = self.system.month_length(y, m)
            self._commit(y, m, (d - 1 + amount) % length + 1)

        elif field == Field.DAY_OF_YEAR:
            length = self.system.year_length(y)
            target = (self.system.day_of_year(y, m, d) - 1 + amount) % length + 1
            h = self.system.date_from_day_of_year(y, target)
            self._commit(h.year, h.month, h.day)

        elif field == Field.DAY_OF_WEEK:
            if amount % 7 == 0:
                return
            dow = self.adjust_day_of_week_offset(self.get(Field.DAY_OF_WEEK))
            move = (dow + amount) % 7 - dow
            base = self.date.scratch(y, m, d)
            base.add(Field.DAY_OF_MONTH, move)
            self._adopt(base)

        elif field == Field.WEEK_OF_YEAR:
            days = self._week_table(
                self.system.day_of_year(y, m, d),
                self.system.year_length(y),
                self.week_of_year(),
                self.get_actual_maximum(Field.WEEK_OF_YEAR),
            )
            index = (self.week_of_year() - 1 + amount) % len(days)
            h = self.system.date_from_day_of_year(y, days[index])
            self._commit(h.year, h.month, h.day)

        elif field == Field.WEEK_OF_MONTH:
            days = self._week_table(
                d,
                self.system.month_length(y, m),
                self.week_of_month(),
                self.get_actual_maximum(Field.WEEK_OF_MONTH),
            )
            index = (self.week_of_month() - 1 + amount) % len(days)
            self._commit(y, m, days[index])

        elif field == Field.DAY_OF_WEEK_IN_MONTH:
            length = self.system.month_length(y, m)
            earlier = list(range(d - 7, 0, -7))[::-1]
            days = earlier + list(range(d, length + 1, 7))
            index = (len(earlier) + amount) % len(days)
            self._commit(y, m, days[index])

        else:
            self.clock.roll(field, amount)
            self.date._sync()

    @staticmethod
    def _week_table(day: int, max_day: int, week: int, max_week: int) -> List[int]:
        """Day reached in every week of the period, pinned to its first and last day."""
        days = [0] * max_week
        days[week - 1] = day
        for i in range(week, max_week):
            days[i] = min(days[i - 1] + 7, max_day)
        for i in range(week - 2, -1, -1):
            days[i] = max(days[i + 1] - 7, 1)
        return days

    # ---------------------------------------------------------
    # Bounds
    # ---------------------------------------------------------

    def get_minimum(self, field: FieldLike) -> int:
        field = as_field(field)
        return self.system.minimum.get(field, _clock.MINIMUM[field])

    def get_maximum(self, field: FieldLike) -> int:
        field = as_field(field)
        return self.system.maximum.get(field, _clock.MAXIMUM[field])

    def get_least_maximum(self, field: FieldLike) -> int:
        field = as_field(field)
        return self.system.least_maximum.get(field, _clock.LEAST_MAXIMUM[field])

    def get_greatest_minimum(self, field: FieldLike) -> int:
        return self.get_minimum(field)

    def get_actual_minimum(self, field: FieldLike) -> int:
        return self.get_minimum(field)

    def get_actual_maximum(self, field: FieldLike) -> int:
        field = as_field(field)
        y, m, d = self._native()
        if field == Field.WEEK_OF_YEAR:
            base = self.date.scratch(y, m, d)
            base.set(Field.DAY_OF_YEAR, self.system.year_length(y))
            return base._fields.week_of_year()
        if field == Field.WEEK_OF_MONTH:
            base = self.date.scratch(y, m, self.system.month_length(y, m))
            return base._fields.week_of_month()
        if field == Field.DAY_OF_MONTH:
            return self.system.month_length(y, m)
        if field == Field.DAY_OF_YEAR:
            return self.system.year_length(y)
        if field == Field.DAY_OF_WEEK_IN_MONTH:
            return day_of_week_in_month(self.system.month_length(y, m))
        return self.get_maximum(field)
