"""
earthcal.engines.solar
----------------------
Generic solar calendar: day count <-> (year, month, day) from year and month
boundary arithmetic, delegated to the Earth engine for the time of day.

Conventions:
  - days_before_year(y): days from the calendar's own epoch to y-01-01
  - days_before_month(y, m): days from y-01-01 to y-m-01
  - days_to_month(y, doy): month containing 0-based day-of-year `doy`
  - epoch_shift: the calendar's own day count of 2000-01-01
Years inside these functions are astronomical (year zero exists). A calendar
without a year zero maps nominal -1 to internal 0 on the way in and back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..core.engine import Calendar
from ..core.errors import ParameterError
from ..core.types import Date
from .earth import earth_calendar

YearEstimate = Tuple[int, Optional[int]]


@dataclass(frozen=True)
class SolarParams:
    """
    Boundary functions of a solar calendar. Exactly one of
    `days_to_year` (exact: days -> (year, doy)) or
    `estimate_year` (days -> (lower-bound year, safe doy bound or None))
    is consumed, depending on the builder used.
    """
    days_before_year: Callable[[int], int]
    days_before_month: Callable[[int, int], int]
    days_to_month: Callable[[int, int], int]
    epoch_shift: int
    has_year_zero: bool = True
    days_to_year: Optional[Callable[[int], Tuple[int, int]]] = None
    estimate_year: Optional[Callable[[int], YearEstimate]] = None

    def __post_init__(self) -> None:
        for field in ("days_before_year", "days_before_month", "days_to_month"):
            if not callable(getattr(self, field)):
                raise ParameterError(f"{field} must be callable")
        if self.days_to_year is None and self.estimate_year is None:
            raise ParameterError("one of days_to_year or estimate_year is required")

    def internal_year(self, y: int) -> int:
        if not self.has_year_zero and y < 0:
            return y + 1
        return y

    def external_year(self, y: int) -> int:
        if not self.has_year_zero and y <= 0:
            return y - 1
        return y


def solar_day_functions(p: SolarParams, days_to_year: Callable[[int], Tuple[int, int]]):
    """(days_to_date, date_to_days) with day zero at 2000-01-01."""

    def date_to_days(d: Date) -> int:
        y = p.internal_year(d.year)
        y += (d.month - 1) // 12
        m = (d.month - 1) % 12 + 1
        return p.days_before_year(y) + p.days_before_month(y, m) + (d.day - 1) - p.epoch_shift

    def days_to_date(days: int) -> Date:
        y, doy = days_to_year(days + p.epoch_shift)
        m = p.days_to_month(y, doy)
        return Date(p.external_year(y), m, doy - p.days_before_month(y, m) + 1)

    return days_to_date, date_to_days


def estimating_days_to_year(p: SolarParams) -> Callable[[int], Tuple[int, int]]:
    """
    Turns a cheap lower-bound year estimator into an exact days -> (year, doy).
    The true year is the estimate or the one after it.
    """
    estimate_year = p.estimate_year
    days_before_year = p.days_before_year

    # a year has at most 366 days, so no bound beyond doy 365 can be safe
    _, safe = estimate_year(0)
    if safe is not None and not 0 <= safe <= 365:
        raise ParameterError(f"safe day-of-year bound must lie in 0..365, got {safe}")

    def days_to_year(n: int) -> Tuple[int, int]:
        y, safe = estimate_year(n)
        doy = n - days_before_year(y)
        if safe is not None and 0 <= doy <= safe:
            return y, doy
        doy_next = n - days_before_year(y + 1)
        if doy_next >= 0:
            return y + 1, doy_next
        return y, doy

    return days_to_year


def solar_calendar(name: str, long_name: str, params: SolarParams, **earth_kw) -> Calendar:
    """Solar calendar from an exact `days_to_year`."""
    if params.days_to_year is None:
        raise ParameterError("solar_calendar needs days_to_year; use solar_ecalendar for estimators")
    days_to_date, date_to_days = solar_day_functions(params, params.days_to_year)
    return earth_calendar(name, long_name, days_to_date, date_to_days, has_year_zero=params.has_year_zero, **earth_kw)


def solar_ecalendar(name: str, long_name: str, params: SolarParams, **earth_kw) -> Calendar:
    """Solar calendar from a year estimator (see `estimating_days_to_year`)."""
    if params.estimate_year is None:
        raise ParameterError("solar_ecalendar needs estimate_year")
    days_to_date, date_to_days = solar_day_functions(params, estimating_days_to_year(params))
    return earth_calendar(name, long_name, days_to_date, date_to_days, has_year_zero=params.has_year_zero, **earth_kw)


# ============================================================
# March-based month boundaries (shared by ISO and Julian)
# ============================================================

def days_before_month_for(m: int, leap: bool) -> int:
    # (367m - 362)/12 counts February as 30 days; fix up after February
    days = (367 * m - 362) // 12
    if m <= 2:
        return days
    return days - 1 if leap else days - 2


def month_for(doy: int, leap: bool) -> int:
    if doy < 59 + leap:
        correction = 0
    else:
        correction = 1 if leap else 2
    return (12 * (doy + correction) + 373) // 367


# ============================================================
# ISO / proleptic Gregorian
# ============================================================

# days_before_year(2000): day count of 2000-01-01 from 0001-01-01
ISO_EPOCH_SHIFT = 730119

ISO_SAFE_DOY = 363


def is_leap(y: int) -> bool:
    return y % 4 == 0 and (y % 100 != 0 or y % 400 == 0)


def iso_days_before_year(y: int) -> int:
    y1 = y - 1
    return 365 * y1 + y1 // 4 - y1 // 100 + y1 // 400


def iso_days_before_month(y: int, m: int) -> int:
    return days_before_month_for(m, is_leap(y))


def iso_days_to_month(y: int, doy: int) -> int:
    return month_for(doy, is_leap(y))


def iso_estimate_year(n: int) -> YearEstimate:
    """Lower-bound year for day count n (0 = 0001-01-01): 400-year eras, then mean year length."""
    era, day_of_era = divmod(n, 146097)
    return 400 * era + (400 * day_of_era) // 146097 + 1, ISO_SAFE_DOY


def iso_params(*, has_year_zero: bool = True) -> SolarParams:
    return SolarParams(
        days_before_year=iso_days_before_year,
        days_before_month=iso_days_before_month,
        days_to_month=iso_days_to_month,
        epoch_shift=ISO_EPOCH_SHIFT,
        has_year_zero=has_year_zero,
        estimate_year=iso_estimate_year,
    )


# ============================================================
# Proleptic Julian
# ============================================================

# Julian 1999-12-19 == Gregorian 2000-01-01
JULIAN_EPOCH_SHIFT = 730121


def is_julian_leap(y: int) -> bool:
    return y % 4 == 0


def julian_days_before_year(y: int) -> int:
    y1 = y - 1
    return 365 * y1 + y1 // 4


def julian_days_before_month(y: int, m: int) -> int:
    return days_before_month_for(m, is_julian_leap(y))


def julian_days_to_month(y: int, doy: int) -> int:
    return month_for(doy, is_julian_leap(y))


def julian_days_to_year(n: int) -> Tuple[int, int]:
    y = (4 * n + 1464) // 1461
    return y, n - julian_days_before_year(y)


def julian_params(*, has_year_zero: bool = False) -> SolarParams:
    return SolarParams(
        days_before_year=julian_days_before_year,
        days_before_month=julian_days_before_month,
        days_to_month=julian_days_to_month,
        epoch_shift=JULIAN_EPOCH_SHIFT,
        has_year_zero=has_year_zero,
        days_to_year=julian_days_to_year,
    )
