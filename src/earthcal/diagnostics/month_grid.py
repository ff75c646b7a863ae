#!/usr/bin/env python3
from __future__ import annotations

import argparse

import earthcal
from earthcal.core.types import Date


def dow_header() -> str:
    return "Mo  Tu  We  Th  Fr  Sa  Su"


def print_grid(title: str, weeks: list[list[str]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print("  ".join(wk))
    print()


def month_weeks(cal: earthcal.Calendar, year: int, month: int) -> list[list[str]]:
    first = Date(year, month, 1)
    first_day = cal.date_to_days(first)
    n = cal.days_in_month(year, month)

    weeks: list[list[str]] = []
    wk: list[str] = ["  "] * (cal.weekday(first) - 1)
    # labels come from the calendar, so a cutover month skips its gap
    for k in range(n):
        wk.append(f"{cal.days_to_date(first_day + k).day:2d}")
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk.extend(["  "] * (7 - len(wk)))
        weeks.append(wk)
    return weeks


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a month grid for a registered calendar.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default="iso", help=f"one of {earthcal.list_calendars()}")
    args = p.parse_args(argv)

    cal = earthcal.get_calendar(args.calendar)
    d = cal.normalize(Date(args.year, args.month, 1))
    era = cal.show_era(d)
    title = f"{cal.long_name}  {d.year}-{cal.month_prefix}{d.month:02d}" + (f" {era}" if era else "")
    print_grid(title, month_weeks(cal, d.year, d.month))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
