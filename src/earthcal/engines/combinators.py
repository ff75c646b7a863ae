"""
earthcal.engines.combinators
----------------------------
New calendars from existing ones, built from their day-count functions.
"""

from __future__ import annotations

from typing import Callable, Optional

from ..core.engine import Calendar
from ..core.types import Date
from .earth import earth_calendar


def combine(
    switch: Date,
    cal_a: Calendar,
    cal_b: Calendar,
    *,
    name: Optional[str] = None,
    long_name: Optional[str] = None,
    show_era: Optional[Callable[[Date], str]] = None,
) -> Calendar:
    """
    `cal_b` from `switch` (a cal_b date) onwards, `cal_a` strictly before it.
    Dates are told apart by their position in cal_b, so a date falling in
    the gap of a cutover is read on cal_a's side.
    """
    switch_day = cal_b.date_to_days(switch)
    switch_date = cal_b.days_to_date(switch_day)

    def on_b(d: Date) -> bool:
        return cal_b.date_to_days(d) >= switch_day

    def days_to_date(n: int) -> Date:
        return cal_b.days_to_date(n) if n >= switch_day else cal_a.days_to_date(n)

    def date_to_days(d: Date) -> int:
        return cal_b.date_to_days(d) if on_b(d) else cal_a.date_to_days(d)

    def era(d: Date) -> str:
        return cal_b.show_era(d) if on_b(d) else cal_a.show_era(d)

    return earth_calendar(
        name or f"{cal_a.name}+{cal_b.name}",
        long_name or f"{cal_a.long_name} until {switch_date}, then {cal_b.long_name}",
        days_to_date,
        date_to_days,
        month_prefix=cal_b.month_prefix,
        show_era=show_era or era,
        timescale=cal_b.timescale,
        has_year_zero=cal_b.has_year_zero,
    )


def year_shift(
    shift: int,
    cal: Calendar,
    *,
    name: Optional[str] = None,
    long_name: Optional[str] = None,
    show_era: Optional[Callable[[Date], str]] = None,
) -> Calendar:
    """Same days as `cal`, but every displayed year is cal's year minus `shift`."""

    def days_to_date(n: int) -> Date:
        d = cal.days_to_date(n)
        return Date(d.year - shift, d.month, d.day)

    def date_to_days(d: Date) -> int:
        return cal.date_to_days(Date(d.year + shift, d.month, d.day))

    def era(d: Date) -> str:
        return cal.show_era(Date(d.year + shift, d.month, d.day))

    return earth_calendar(
        name or f"{cal.name}{-shift:+d}",
        long_name or cal.long_name,
        days_to_date,
        date_to_days,
        month_prefix=cal.month_prefix,
        show_era=show_era or era,
        timescale=cal.timescale,
        has_year_zero=True,
    )
