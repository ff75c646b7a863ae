from __future__ import annotations

import logging
from dataclasses import dataclass
from fractions import Fraction
from typing import List, Optional, Union

from .core.engine import Calendar, Registry
from .core.types import MIDNIGHT, Clock, Date, Duration, Instant, NumT, as_fraction, floor_split
from .engines.specs import ISO
from .engines.timezone import UTC_ZONE, Timezone, resolve
from .reference.leap_seconds import UTC

logger = logging.getLogger(__name__)

CalendarLike = Union[Calendar, str]
TimezoneLike = Union[Timezone, str]

# calendar seconds of 1970-01-01T00:00 counted back from 2000-01-01T00:00
POSIX_2000 = 946684800

_calendars: Optional[Registry[Calendar]] = None
_timezones: Optional[Registry[Timezone]] = None


def set_registries(calendars: Registry[Calendar], timezones: Registry[Timezone]) -> None:
    global _calendars, _timezones
    _calendars = calendars
    _timezones = timezones


def _cals() -> Registry[Calendar]:
    if _calendars is None:
        raise RuntimeError("Calendar registry not initialized")
    return _calendars


def _zones() -> Registry[Timezone]:
    if _timezones is None:
        raise RuntimeError("Timezone registry not initialized")
    return _timezones


def _calendar(cal: CalendarLike) -> Calendar:
    return _cals().get(cal) if isinstance(cal, str) else cal


def _timezone(tz: TimezoneLike) -> Timezone:
    return _zones().get(tz) if isinstance(tz, str) else tz


@dataclass(frozen=True)
class DateClock:
    """Result of `instant_dc`; unpacks as (date, clock, utc_offset, abbreviation)."""
    date: Date
    clock: Clock
    utc_offset: Duration
    abbreviation: str

    def __iter__(self):
        return iter((self.date, self.clock, self.utc_offset, self.abbreviation))


# ============================================================
# Instant <-> (date, clock)
# ============================================================

def instant(
    d: Date,
    c: Clock = MIDNIGHT,
    tz: TimezoneLike = UTC_ZONE,
    cal: CalendarLike = ISO,
) -> Instant:
    """Local (date, clock) in `tz`, read on calendar `cal` -> Instant."""
    return resolve(d, c, _timezone(tz), _calendar(cal))


def instant_dc(i: Instant, tz: TimezoneLike = UTC_ZONE, cal: CalendarLike = ISO) -> DateClock:
    """Instant -> local (date, clock) in `tz` on calendar `cal`, with the offset used."""
    zone = _timezone(tz)
    calendar = _calendar(cal)
    offset, abbreviation = zone.utc_offset(i)
    d, c = calendar.instant_to_dc(i, offset)
    return DateClock(d, c, offset, abbreviation)


# ============================================================
# POSIX seconds (86400-second days since 1970-01-01T00:00 UTC)
# ============================================================

def from_posix(seconds: NumT) -> Instant:
    return UTC.from_calendar_seconds(as_fraction(seconds) - POSIX_2000)


def to_posix(i: Instant) -> Fraction:
    """A leap second shares its POSIX value with the midnight that follows it."""
    whole, frac, leap = UTC.calendar_seconds(i)
    return whole + leap + frac + POSIX_2000


# ============================================================
# Rendering
# ============================================================

def format_offset(offset: Duration) -> str:
    sign = "-" if offset.seconds < 0 else "+"
    whole, frac = floor_split(abs(offset.seconds))
    hours, rest = divmod(whole, 3600)
    minutes, seconds = divmod(rest, 60)
    out = f"{sign}{hours:02d}:{minutes:02d}"
    if seconds or frac:
        out += ":" + str(Clock(0, 0, seconds + frac))[6:]
    return out


def format_dc(dc: DateClock, cal: CalendarLike = ISO) -> str:
    """
    [-]YYYY-<prefix>MM-DDTHH:MM:SS[.f]+HH:MM[ ERA]

    On a calendar without a year zero the era label carries the sign, so
    1 BCE prints as 0001 BCE rather than -0001.
    """
    calendar = _calendar(cal)
    d = dc.date
    era = calendar.show_era(d)
    sign = "-" if d.year < 0 and not (era and not calendar.has_year_zero) else ""
    out = (
        f"{sign}{abs(d.year):04d}-{calendar.month_prefix}{d.month:02d}-{d.day:02d}"
        f"T{dc.clock}{format_offset(dc.utc_offset)}"
    )
    if era:
        out += f" {era}"
    return out


# ============================================================
# Registry front-end
# ============================================================

def list_calendars() -> List[str]:
    return _cals().list()


def get_calendar(name: str) -> Calendar:
    return _cals().get(name)


def register_calendar(cal: Calendar, *, name: Optional[str] = None, overwrite: bool = False) -> None:
    key = name or cal.name
    _cals().register(key, cal, overwrite=overwrite)
    logger.debug("registered calendar %s", key)


def list_timezones() -> List[str]:
    return _zones().list()


def get_timezone(name: str) -> Timezone:
    return _zones().get(name)


def register_timezone(tz: Timezone, *, name: Optional[str] = None, overwrite: bool = False) -> None:
    key = name or tz.name
    _zones().register(key, tz, overwrite=overwrite)
    logger.debug("registered timezone %s", key)
