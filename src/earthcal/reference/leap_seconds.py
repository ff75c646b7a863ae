"""
earthcal.reference.leap_seconds
-------------------------------
Built-in TAI-UTC history (IERS Leap_Second.dat) and the standard scales.

  TT  : Terrestrial Time, the reference line of every Instant
  TAI : TT - 32.184 s
  UTC : TAI - (TAI-UTC), with leap seconds

Before 1972-01-01 TAI-UTC is held at its 1972 value of 10 s.
"""

from __future__ import annotations

from bisect import bisect_right
from fractions import Fraction
from typing import Tuple

from ..core.timescale import LeapTable, fixed_timescale, leap_second_timescale
from ..core.types import SECONDS_PER_DAY, Duration, Instant

# MJD of 2000-01-01, calendar second zero of every scale
MJD_2000 = 51544

TT_MINUS_TAI = Fraction(32184, 1000)

# (MJD from which the value applies, TAI-UTC in seconds)
IERS_TAI_UTC: Tuple[Tuple[int, int], ...] = (
    (41317, 10),  # 1972-01-01
    (41499, 11),  # 1972-07-01
    (41683, 12),  # 1973-01-01
    (42048, 13),  # 1974-01-01
    (42413, 14),  # 1975-01-01
    (42778, 15),  # 1976-01-01
    (43144, 16),  # 1977-01-01
    (43509, 17),  # 1978-01-01
    (43874, 18),  # 1979-01-01
    (44239, 19),  # 1980-01-01
    (44786, 20),  # 1981-07-01
    (45151, 21),  # 1982-07-01
    (45516, 22),  # 1983-07-01
    (46247, 23),  # 1985-07-01
    (47161, 24),  # 1988-01-01
    (47892, 25),  # 1990-01-01
    (48257, 26),  # 1991-01-01
    (48804, 27),  # 1992-07-01
    (49169, 28),  # 1993-07-01
    (49534, 29),  # 1994-07-01
    (50083, 30),  # 1996-01-01
    (50630, 31),  # 1997-07-01
    (51179, 32),  # 1999-01-01
    (53736, 33),  # 2006-01-01
    (54832, 34),  # 2009-01-01
    (56109, 35),  # 2012-07-01
    (57204, 36),  # 2015-07-01
    (57754, 37),  # 2017-01-01
)


def mjd_to_calendar_second(mjd: int) -> int:
    return (mjd - MJD_2000) * SECONDS_PER_DAY


def utc_table(entries: Tuple[Tuple[int, int], ...] = IERS_TAI_UTC) -> LeapTable:
    """LeapTable for TT - UTC built from (MJD, TAI-UTC) rows."""
    rows = [(mjd_to_calendar_second(mjd), v) for mjd, v in entries]
    return LeapTable.build(rows, initial=entries[0][1], base=TT_MINUS_TAI)


UTC_TABLE = utc_table()

TT = fixed_timescale("TT", Duration(0))
TAI = fixed_timescale("TAI", Duration(TT_MINUS_TAI))
UTC = leap_second_timescale("UTC", UTC_TABLE)

DEFAULT_TIMESCALE = UTC


def tai_minus_utc(i: Instant, table: LeapTable = UTC_TABLE) -> Fraction:
    """TAI-UTC (seconds) in effect at `i`. Inside a leap second the old value still holds."""
    k = bisect_right(table.thresholds, i.seconds) - 1
    return table.offset_at(k)


def leap_seconds_between(a: Instant, b: Instant, table: LeapTable = UTC_TABLE) -> Fraction:
    """Net leap seconds inserted in [a, b) (negative if b precedes a)."""
    return tai_minus_utc(b, table) - tai_minus_utc(a, table)
