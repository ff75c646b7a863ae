"""
earthcal.core.timescale
-----------------------
A Timescale decides how the continuous TT second count of an Instant is
read as "calendar seconds": 86400 per day, plus any leap seconds that have
to be folded into the last minute of a day.

Reference frame: Instant zero is 2000-01-01T00:00:00 TT. Calendar seconds
are counted from 2000-01-01T00:00:00 of the scale itself.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass
from fractions import Fraction
from typing import Callable, Sequence, Tuple

from .types import Duration, Instant, NumT, Timestamp, as_fraction, floor_split

# (whole calendar seconds, fraction in [0,1), leap seconds elapsed in the current leap)
CalendarSeconds = Tuple[int, Fraction, int]


@dataclass(frozen=True)
class Timescale:
    """
    name:                   short label ("UTC", "TT", ...)
    has_leap_seconds:       whether calendar seconds skip over leap seconds
    calendar_seconds:       Instant -> (whole, fraction, leap_count)
    from_calendar_seconds:  calendar seconds -> Instant (leap_count taken as 0)
    """
    name: str
    has_leap_seconds: bool
    calendar_seconds: Callable[[Instant], CalendarSeconds]
    from_calendar_seconds: Callable[[Fraction], Instant]

    def timestamp(self, i: Instant) -> Tuple[Timestamp, int]:
        whole, frac, leap = self.calendar_seconds(i)
        return Timestamp(whole, frac), leap

    def __repr__(self) -> str:
        return f"Timescale({self.name!r}, has_leap_seconds={self.has_leap_seconds})"


def fixed_timescale(name: str, offset: Duration) -> Timescale:
    """A leap-free scale running `offset` seconds behind TT."""
    off = offset.seconds

    def calendar_seconds(i: Instant) -> CalendarSeconds:
        whole, frac = floor_split(i.seconds - off)
        return whole, frac, 0

    def from_calendar_seconds(s: Fraction) -> Instant:
        return Instant(as_fraction(s) + off)

    return Timescale(name, False, calendar_seconds, from_calendar_seconds)


@dataclass(frozen=True)
class LeapTable:
    """
    Step function of the scale offset.

    marks[k]:    calendar second of the midnight from which offsets[k] applies
    offsets[k]:  cumulative offset (seconds) from marks[k] on
    initial:     offset before the first mark
    base:        constant part of TT minus the scale (e.g. 32.184 s for TT - TAI)
    """
    marks: Tuple[int, ...]
    offsets: Tuple[Fraction, ...]
    initial: Fraction
    base: Fraction

    @classmethod
    def build(cls, entries: Sequence[Tuple[int, NumT]], *, initial: NumT, base: NumT) -> "LeapTable":
        rows = sorted((int(c), as_fraction(a)) for c, a in entries)
        return cls(
            marks=tuple(c for c, _ in rows),
            offsets=tuple(a for _, a in rows),
            initial=as_fraction(initial),
            base=as_fraction(base),
        )

    def offset_at(self, k: int) -> Fraction:
        return self.offsets[k] if k >= 0 else self.initial

    @property
    def thresholds(self) -> Tuple[Fraction, ...]:
        """TT seconds of each midnight at which a new offset takes effect."""
        return tuple(c + self.base + a for c, a in zip(self.marks, self.offsets))


def leap_second_timescale(name: str, table: LeapTable) -> Timescale:
    """
    A scale whose calendar seconds skip leap seconds listed in `table`.

    An inserted leap second is reported as whole = 23:59:59 of the day with
    leap_count = 1, so the Earth engine renders it as second 60. A calendar
    second deleted by a negative leap second maps to the next existing one.
    """
    thresholds = table.thresholds
    marks = table.marks

    def calendar_seconds(i: Instant) -> CalendarSeconds:
        t = i.seconds
        k = bisect_right(thresholds, t) - 1
        a = table.offset_at(k)
        n = k + 1
        if n < len(thresholds):
            delta = table.offsets[n] - a
            start = thresholds[n] - delta
            if delta > 0 and t >= start:
                g_whole, g_frac = floor_split(t - start)
                return marks[n] - 1, g_frac, g_whole + 1
        whole, frac = floor_split(t - table.base - a)
        return whole, frac, 0

    def from_calendar_seconds(s: Fraction) -> Instant:
        s = as_fraction(s)
        k = bisect_right(marks, s) - 1
        return Instant(s + table.base + table.offset_at(k))

    return Timescale(name, True, calendar_seconds, from_calendar_seconds)
