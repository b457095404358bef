from __future__ import annotations

import argparse
from typing import Optional

import multical
from multical.core.types import CalendarType, Weekday


def dow_header(first_day_of_week: int) -> str:
    labels = []
    for i in range(7):
        wd = Weekday((first_day_of_week - 1 + i) % 7 + 1)
        labels.append(wd.name[:2].title().ljust(6))
    return " ".join(labels).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, header: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(header)
    print("-" * len(header))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_weeks(calendar: str, year: int, month: int, first_day_of_week: Optional[int] = None) -> list[list[tuple[str, str]]]:
    """Week rows of a native month; each cell pairs the native day with the Gregorian MM-DD."""
    d = multical.new_instance(calendar, "UTC", millis=0, first_day_of_week=first_day_of_week)
    d.set_date(year, month, 1)
    length = d.month_length

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (d.day_of_week - d.first_day_of_week + 7) % 7
    for _ in range(pad):
        wk.append(cell("", ""))
    for _ in range(length):
        g = d.to_civil()
        wk.append(cell(f"{d.day_of_month:2d}", f"{g.month + 1:02d}-{g.day_of_month:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d.add(multical.Field.DAY_OF_MONTH, 1)
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def native_month_calendar(calendar: str, year: int, month: int, first_day_of_week: Optional[int] = None) -> None:
    d = multical.new_instance(calendar, "UTC", millis=0, first_day_of_week=first_day_of_week)
    d.set_date(year, month, 1)
    weeks = month_weeks(calendar, year, month, d.first_day_of_week)
    title = f"{calendar} month  {year}-{month + 1:02d}  {d.month_name}"
    print_grid(title, dow_header(d.first_day_of_week), weeks)


def _weekday(s: str) -> int:
    try:
        return int(Weekday[s.strip().upper()])
    except KeyError:
        raise argparse.ArgumentTypeError(f"unknown weekday '{s}'") from None


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        prog="multical month",
        description="Print a native month grid with the matching Gregorian dates.",
    )
    p.add_argument("year", type=int)
    p.add_argument("month", type=int, help="1-based month number")
    p.add_argument("--calendar", default=CalendarType.PERSIAN.value, choices=[t.value for t in CalendarType])
    p.add_argument("--first-day", type=_weekday, default=None, help="e.g. saturday (default: the calendar's own)")
    args = p.parse_args(argv)

    native_month_calendar(args.calendar, args.year, args.month - 1, args.first_day)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
