"""
earthcal.engines.earth
----------------------
Builds a full Calendar from a pair of integer day-count functions, assuming
ordinary 86400-second days plus whatever leap seconds the timescale reports.

All field overflow (hour 25, minute -3, day 33, ...) is carried into the day
count here, so every calendar built on top gets the same normalisation.
"""

from __future__ import annotations

from fractions import Fraction
from typing import Callable, Optional, Tuple

from ..core.engine import Calendar, DateToDays, DaysToDate, no_era
from ..core.timescale import Timescale
from ..core.types import SECONDS_PER_DAY, Clock, Date, Duration, Instant, ZERO
from ..reference.leap_seconds import DEFAULT_TIMESCALE


def split_day(seconds: Fraction) -> Tuple[int, int, Fraction]:
    """Within-day seconds -> (hour, minute, second)."""
    hour, rest = divmod(seconds, 3600)
    minute, second = divmod(rest, 60)
    return int(hour), int(minute), second


def earth_calendar(
    name: str,
    long_name: str,
    days_to_date: DaysToDate,
    date_to_days: DateToDays,
    *,
    day_shift: int = 0,
    month_prefix: str = "",
    show_era: Optional[Callable[[Date], str]] = None,
    timescale: Timescale = DEFAULT_TIMESCALE,
    has_year_zero: bool = True,
) -> Calendar:
    """
    days_to_date / date_to_days count days from their own day zero, which
    lies `day_shift` days after 2000-01-01 (e.g. -2451545 for Julian Day Numbers).
    """

    def instant_to_dc(i: Instant, delta: Duration = ZERO) -> Tuple[Date, Clock]:
        stamp, leap = timescale.timestamp(i)
        days, within = divmod(stamp.to_seconds() + delta.seconds, SECONDS_PER_DAY)
        hour, minute, second = split_day(within)
        # a leap second shows up as 23:59:60.x (or its local equivalent)
        return days_to_date(days - day_shift), Clock(hour, minute, second + leap)

    def dc_to_instant(d: Date, c: Clock, delta: Duration = ZERO) -> Instant:
        second = c.second
        extra = 0
        if second >= 60:
            extra = second - 59
            second = 59
        carry, within = divmod(c.hour * 3600 + c.minute * 60 + second, SECONDS_PER_DAY)
        days = date_to_days(Date(d.year, d.month, d.day + carry)) + day_shift
        cal_seconds = days * SECONDS_PER_DAY + within - delta.seconds
        return timescale.from_calendar_seconds(cal_seconds) + Duration(extra)

    return Calendar(
        name=name,
        long_name=long_name,
        timescale=timescale,
        instant_to_dc=instant_to_dc,
        dc_to_instant=dc_to_instant,
        days_to_date=lambda n: days_to_date(n - day_shift),
        date_to_days=lambda d: date_to_days(d) + day_shift,
        month_prefix=month_prefix,
        show_era=show_era or no_era,
        has_year_zero=has_year_zero,
    )
