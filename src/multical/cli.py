from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from multical.core.errors import MulticalError
from multical.core.types import CalendarType

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^(-?\d+)-(\d{1,2})-(\d{1,2})$")
_CALENDARS = [t.value for t in CalendarType]


def _parse_ymd(s: str) -> tuple[int, int, int]:
    """'[-]YYYY-MM-DD' -> (year, 0-based month, day); astronomical years."""
    m = _DATE_RE.match(s.strip())
    if m is None:
        raise argparse.ArgumentTypeError(f"expected [-]YYYY-MM-DD, got '{s}'")
    y, mo, d = (int(g) for g in m.groups())
    return y, mo - 1, d


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_convert(argv: list[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical convert", description="Convert a date between calendars")
    p.add_argument("date", type=_parse_ymd, help="[-]YYYY-MM-DD in the source calendar (1-based month)")
    p.add_argument("--from", dest="source", default="civil", choices=_CALENDARS)
    p.add_argument("--to", dest="target", default="persian", choices=_CALENDARS)
    p.add_argument("--locale", default=None, help="locale for names (default: the target calendar's own)")
    args = p.parse_args(argv)

    year, month, day = args.date
    src = multical.new_instance(args.source, "UTC", millis=0)
    src.set_date(year, month, day)
    dst = multical.new_instance(args.target, "UTC", args.locale, millis=src.time_in_millis)
    logger.debug("convert %r -> %r", src, dst)

    print(f"{args.source:9s} {src.short_date_string}  {src.weekday_name}, {src.day_of_month} {src.month_name}")
    print(f"{args.target:9s} {dst.short_date_string}  {dst.weekday_name}, {dst.day_of_month} {dst.month_name}")
    return 0


def cmd_year_info(argv: list[str]) -> int:
    import multical

    p = argparse.ArgumentParser(prog="multical year-info", description="Leap flag and month lengths of a year")
    p.add_argument("year", type=int)
    p.add_argument("--calendar", default="civil", choices=_CALENDARS)
    args = p.parse_args(argv)

    leap = multical.is_leap_year(args.year, calendar=args.calendar)
    print(f"calendar    : {args.calendar}")
    print(f"year        : {args.year}")
    print(f"leap        : {'yes' if leap else 'no'}")
    print(f"year length : {multical.year_length(args.year, calendar=args.calendar)}")
    print("months      : " + " ".join(str(n) for n in multical.month_lengths(args.year, calendar=args.calendar)))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="multical", description="Multi-calendar date toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("month", help="Print a native month grid (diagnostics)")
    sub.add_parser("year-info", help="Leap flag and month lengths of a year")
    sub.add_parser("round-trip", help="Random conversion round-trip check (diagnostics)")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.cmd == "convert":
            return cmd_convert(rest)

        if args.cmd == "month":
            return _run_module_main("multical.diagnostics.pretty_month", rest)

        if args.cmd == "year-info":
            return cmd_year_info(rest)

        if args.cmd == "round-trip":
            return _run_module_main("multical.diagnostics.round_trip", rest)
    except MulticalError as e:
        print(f"multical: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
