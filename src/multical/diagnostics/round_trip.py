from __future__ import annotations

import argparse
import random
from typing import List

import multical
from multical.core.time import from_jdn, to_jdn
from multical.core.types import GregorianDate


def parse_calendars(s: str) -> List[str]:
    # "persian,hijri" -> ["persian", "hijri"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: GregorianDate,
    end: GregorianDate,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """Gregorian -> native -> Gregorian, then native -> Gregorian -> native."""
    random.seed(seed)
    system = multical.get_system(calendar)
    lo, hi = to_jdn(start), to_jdn(end)
    failures = 0

    for _ in range(N):
        g0 = from_jdn(random.randint(lo, hi))
        native = system.from_gregorian(g0)
        back = system.to_gregorian(native)
        again = system.from_gregorian(back)

        ok = (
            back == g0
            and again == native
            and 0 <= native.month <= 11
            and 1 <= native.day <= system.month_length(native.year, native.month)
        )
        if not ok:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("g0:", g0)
            print("native:", native)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def _parse_ymd(s: str) -> GregorianDate:
    sign = -1 if s.startswith("-") else 1
    y, m, d = s.lstrip("-").split("-")
    return GregorianDate(sign * int(y), int(m) - 1, int(d))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="multical round-trip", description="Random round-trip tests: gregorian -> native -> gregorian.")
    p.add_argument("--calendars", type=str, default=",".join(multical.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="-1000-01-01", help="Start date [-]YYYY-MM-DD (astronomical years).")
    p.add_argument("--end", type=str, default="3000-12-31", help="End date [-]YYYY-MM-DD (astronomical years).")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    start, end = _parse_ymd(args.start), _parse_ymd(args.end)
    total = 0
    for calendar in parse_calendars(args.calendars):
        failures = roundtrip_test(calendar, args.N, start, end, args.seed, max_failures=args.max_failures)
        print(f"{calendar}: {args.N} trials, {failures} failures")
        total += failures
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
