"""
earthcal.core.types
-------------------
Immutable value types shared by every layer.

All physical time values are exact `Fraction` counts of SI seconds.
An Instant counts seconds since 2000-01-01T00:00:00 TT.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Tuple, Union

NumT = Union[int, float, str, Fraction]

SECONDS_PER_DAY = 86400


def as_fraction(x: NumT) -> Fraction:
    """Exact conversion of anything `Fraction()` accepts (floats are taken bit-exact)."""
    if isinstance(x, Fraction):
        return x
    return Fraction(x)


def floor_split(x: Fraction) -> Tuple[int, Fraction]:
    """Floored split: x = whole + frac with 0 <= frac < 1, also for negative x."""
    whole = x.numerator // x.denominator
    return whole, x - whole


@dataclass(frozen=True, order=True)
class Duration:
    """A signed span of SI seconds. Also used as a UTC offset."""
    seconds: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, Fraction):
            object.__setattr__(self, "seconds", as_fraction(self.seconds))

    @classmethod
    def of(
        cls,
        *,
        days: NumT = 0,
        hours: NumT = 0,
        minutes: NumT = 0,
        seconds: NumT = 0,
        milliseconds: NumT = 0,
        microseconds: NumT = 0,
        nanoseconds: NumT = 0,
    ) -> "Duration":
        total = (
            as_fraction(days) * SECONDS_PER_DAY
            + as_fraction(hours) * 3600
            + as_fraction(minutes) * 60
            + as_fraction(seconds)
            + as_fraction(milliseconds) / 1000
            + as_fraction(microseconds) / 1000000
            + as_fraction(nanoseconds) / 1000000000
        )
        return cls(total)

    def __add__(self, other: object) -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.seconds + other.seconds)
        return NotImplemented

    def __sub__(self, other: object) -> "Duration":
        if isinstance(other, Duration):
            return Duration(self.seconds - other.seconds)
        return NotImplemented

    def __neg__(self) -> "Duration":
        return Duration(-self.seconds)

    def __pos__(self) -> "Duration":
        return self

    def __abs__(self) -> "Duration":
        return Duration(abs(self.seconds))

    def __mul__(self, k: object) -> "Duration":
        if isinstance(k, (int, Fraction)):
            return Duration(self.seconds * k)
        return NotImplemented

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        return self.seconds != 0

    def __float__(self) -> float:
        return float(self.seconds)

    def __repr__(self) -> str:
        return f"Duration({self.seconds})"


ZERO = Duration(Fraction(0))


@dataclass(frozen=True, order=True)
class Instant:
    """A point on the continuous (TT) time line, in seconds since 2000-01-01T00:00 TT."""
    seconds: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, Fraction):
            object.__setattr__(self, "seconds", as_fraction(self.seconds))

    def __add__(self, other: object) -> "Instant":
        if isinstance(other, Duration):
            return Instant(self.seconds + other.seconds)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object):
        if isinstance(other, Instant):
            return Duration(self.seconds - other.seconds)
        if isinstance(other, Duration):
            return Instant(self.seconds - other.seconds)
        return NotImplemented

    def __repr__(self) -> str:
        return f"Instant({self.seconds})"


EPOCH = Instant(Fraction(0))


@dataclass(frozen=True, order=True)
class Timestamp:
    """Whole seconds plus a fraction in [0, 1). Intermediate form only."""
    whole: int
    fraction: Fraction

    @classmethod
    def from_seconds(cls, x: NumT) -> "Timestamp":
        whole, frac = floor_split(as_fraction(x))
        return cls(whole, frac)

    def to_seconds(self) -> Fraction:
        return self.whole + self.fraction


@dataclass(frozen=True, order=True)
class Date:
    """(year, month, day). Out-of-range fields are normalised by the calendar, never rejected."""
    year: int
    month: int = 1
    day: int = 1

    def __iter__(self):
        return iter((self.year, self.month, self.day))

    def replace(self, **kw) -> "Date":
        return Date(kw.get("year", self.year), kw.get("month", self.month), kw.get("day", self.day))

    def __str__(self) -> str:
        sign = "-" if self.year < 0 else ""
        return f"{sign}{abs(self.year):04d}-{self.month:02d}-{self.day:02d}"


@dataclass(frozen=True, order=True)
class Clock:
    """(hour, minute, second). `second` may reach 60 and beyond inside a leap second."""
    hour: int = 0
    minute: int = 0
    second: Fraction = Fraction(0)

    def __post_init__(self) -> None:
        if not isinstance(self.second, Fraction):
            object.__setattr__(self, "second", as_fraction(self.second))

    def __iter__(self):
        return iter((self.hour, self.minute, self.second))

    def __str__(self) -> str:
        whole, frac = floor_split(self.second)
        out = f"{self.hour:02d}:{self.minute:02d}:{whole:02d}"
        if frac:
            digits = str(int(frac * 1000000000)).zfill(9).rstrip("0")
            out += "." + (digits or "0")
        return out


MIDNIGHT = Clock(0, 0, Fraction(0))
