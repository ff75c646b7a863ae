#!/usr/bin/env python3
from __future__ import annotations

import argparse
from fractions import Fraction
from typing import List

import earthcal
from earthcal.core.types import Instant


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "earthcal[diagnostics]"') from e


def parse_calendars(s: str) -> List[str]:
    # "iso,gregorian,julian" -> ["iso", ...]
    return [x.strip() for x in s.split(",") if x.strip()]


def days_round_trip(name: str, lo: int, hi: int, *, max_failures: int) -> int:
    cal = earthcal.get_calendar(name)
    failures = 0
    for n in range(lo, hi + 1):
        d = cal.days_to_date(n)
        back = cal.date_to_days(d)
        if back != n:
            failures += 1
            print(f"FAIL days {name}: {n} -> {d} -> {back}")
            if failures >= max_failures:
                break
    return failures


def instant_round_trip(name: str, N: int, span_days: int, seed: int, *, zone: str, max_failures: int) -> int:
    np = _need_numpy()
    cal = earthcal.get_calendar(name)
    tz = earthcal.get_timezone(zone)

    rng = np.random.default_rng(seed)
    # nanosecond grid across +/- span_days around 2000-01-01
    ns = rng.integers(-span_days * 86400 * 10**9, span_days * 86400 * 10**9, size=N, dtype=np.int64)

    failures = 0
    for x in ns:
        i = Instant(Fraction(int(x), 10**9))
        dc = earthcal.instant_dc(i, tz, cal)
        back = earthcal.instant(dc.date, dc.clock, tz, cal)
        if back != i:
            failures += 1
            print(f"FAIL instant {name}/{zone}: {i} -> {earthcal.format_dc(dc, cal)} -> {back}")
            if failures >= max_failures:
                break
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip sweeps: days <-> date and instant <-> (date, clock).")
    p.add_argument("--calendars", type=str, default="iso,gregorian,julian,julian-gregorian,holocene",
                   help="Comma-separated calendar list.")
    p.add_argument("--lo", type=int, default=-200000, help="First day count (0 = 2000-01-01).")
    p.add_argument("--hi", type=int, default=200000, help="Last day count.")
    p.add_argument("--N", type=int, default=2000, help="Random instants per calendar.")
    p.add_argument("--span-days", type=int, default=40000, help="Instant sweep half-width in days.")
    p.add_argument("--zone", type=str, default="UTC", help="Registered timezone name.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per check.")
    args = p.parse_args(argv)

    if args.hi < args.lo:
        raise SystemExit("--hi must be >= --lo")

    total_fail = 0
    for name in parse_calendars(args.calendars):
        print(f"Testing {name} ...")
        total_fail += days_round_trip(name, args.lo, args.hi, max_failures=args.max_failures)
        total_fail += instant_round_trip(
            name, args.N, args.span_days, args.seed, zone=args.zone, max_failures=args.max_failures
        )

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
