"""
earthcal.engines.timezone
-------------------------
Timezones as offset functions, and resolution of a local (date, clock) to an
Instant.

Resolution is a per-call decision:
  1. read (date, clock) as if it were UTC -> provisional instant i
  2. UTC zone: done
  3. exact inverse available (leap-free scales only): use it
  4. otherwise two fixed-point passes of "subtract the offset found at the
     current guess"

Ambiguous local times (fall back) and local times inside a gap (spring
forward) both resolve to the earlier of the candidate instants.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from ..core.engine import Calendar
from ..core.types import Clock, Date, Duration, Instant, ZERO

logger = logging.getLogger(__name__)

OffsetFn = Callable[[Instant], Tuple[Duration, str]]
InverseFn = Callable[[Instant], Optional[Instant]]


@dataclass(frozen=True)
class Timezone:
    """
    name:        display name
    utc_offset:  Instant -> (offset, abbreviation), local = UTC + offset
    inverse:     optional exact map from the "read as UTC" instant of a local
                 wall time to the true instant; may return None for instants
                 it does not cover
    """
    name: str
    utc_offset: OffsetFn
    inverse: Optional[InverseFn] = None

    def offset_at(self, i: Instant) -> Duration:
        return self.utc_offset(i)[0]

    def abbreviation_at(self, i: Instant) -> str:
        return self.utc_offset(i)[1]

    def __repr__(self) -> str:
        return f"Timezone({self.name!r})"


def _utc_offset(i: Instant) -> Tuple[Duration, str]:
    return ZERO, "UTC"


UTC_ZONE = Timezone("UTC", _utc_offset, lambda i: i)


def offset_name(hours: int, minutes: int = 0) -> str:
    """UTC+5, UTC-8, UTC+5:30, UTC-3:30"""
    sign = "-" if (hours < 0 or (hours == 0 and minutes < 0)) else "+"
    out = f"UTC{sign}{abs(hours)}"
    if minutes:
        out += f":{abs(minutes):02d}"
    return out


def fixed_offset(hours: int, minutes: int = 0, name: Optional[str] = None) -> Timezone:
    """
    Constant-offset zone. The sign of `minutes` follows the sign of `hours`
    (unless hours is zero); (0, 0) is the UTC zone itself.
    """
    if hours > 0:
        minutes = abs(minutes)
    elif hours < 0:
        minutes = -abs(minutes)
    if hours == 0 and minutes == 0:
        return UTC_ZONE

    offset = Duration.of(hours=hours, minutes=minutes)
    label = name if name is not None else offset_name(hours, minutes)

    def utc_offset(i: Instant) -> Tuple[Duration, str]:
        return offset, label

    def inverse(i: Instant) -> Optional[Instant]:
        return i - offset

    return Timezone(label, utc_offset, inverse)


def _apply_offset(d: Date, c: Clock, provisional: Instant, offset: Duration, cal: Calendar) -> Instant:
    if cal.timescale.has_leap_seconds:
        # subtract in calendar seconds, then re-apply any leap second
        return cal.dc_to_instant(d, c, offset)
    return provisional - offset


def resolve(d: Date, c: Clock, tz: Timezone, cal: Calendar) -> Instant:
    """Local (date, clock) in `tz` on calendar `cal` -> Instant."""
    provisional = cal.dc_to_instant(d, c, ZERO)
    if tz is UTC_ZONE:
        logger.debug("resolve %s %s: utc", d, c)
        return provisional

    # an inverse on instants would count a leap second inside the offset window twice
    if tz.inverse is not None and not cal.timescale.has_leap_seconds:
        exact = tz.inverse(provisional)
        if exact is not None:
            logger.debug("resolve %s %s in %s: exact inverse", d, c, tz.name)
            return exact

    first = tz.offset_at(provisional)
    guess = _apply_offset(d, c, provisional, first, cal)
    second = tz.offset_at(guess)
    if second != first:
        logger.debug("resolve %s %s in %s: two-pass, offset %s -> %s", d, c, tz.name, first, second)
        guess = _apply_offset(d, c, provisional, second, cal)
    else:
        logger.debug("resolve %s %s in %s: two-pass, offset %s stable", d, c, tz.name, first)
    return guess
