from __future__ import annotations
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable, Dict, Generic, List, Optional, Tuple, TypeVar

from .errors import DuplicateNameError, UnknownCalendarError, UnknownTimezoneError
from .timescale import Timescale
from .types import Clock, Date, Duration, Instant

if TYPE_CHECKING:
    from ..engines.timezone import Timezone

DaysToDate = Callable[[int], Date]
DateToDays = Callable[[Date], int]
InstantToDC = Callable[[Instant, Duration], Tuple[Date, Clock]]
DCToInstant = Callable[[Date, Clock, Duration], Instant]


def no_era(d: Date) -> str:
    return ""


@dataclass(frozen=True)
class Calendar:
    """
    Immutable calendar descriptor.

    Two pairs of pure conversion functions:
      instant_to_dc / dc_to_instant : Instant <-> (Date, Clock), given a timezone delta
      days_to_date  / date_to_days  : day count since 2000-01-01 <-> Date
    The second pair is what the combinators build new calendars from.
    """
    name: str
    long_name: str
    timescale: Timescale
    instant_to_dc: InstantToDC
    dc_to_instant: DCToInstant
    days_to_date: DaysToDate
    date_to_days: DateToDays
    month_prefix: str = ""
    show_era: Callable[[Date], str] = no_era
    has_year_zero: bool = True

    def normalize(self, d: Date) -> Date:
        return self.days_to_date(self.date_to_days(d))

    def weekday(self, d: Date) -> int:
        """ISO weekday, 1 = Monday. Day 0 (2000-01-01) was a Saturday."""
        return (self.date_to_days(d) + 5) % 7 + 1

    def days_in_month(self, year: int, month: int) -> int:
        first = self.date_to_days(Date(year, month, 1))
        return self.date_to_days(Date(year, month + 1, 1)) - first

    def days_in_year(self, year: int) -> int:
        return self.date_to_days(Date(year + 1, 1, 1)) - self.date_to_days(Date(year, 1, 1))

    def with_name(self, name: str, long_name: Optional[str] = None) -> "Calendar":
        return replace(self, name=name, long_name=long_name if long_name is not None else self.long_name)

    def __repr__(self) -> str:
        return f"Calendar({self.name!r}, timescale={self.timescale.name})"


T = TypeVar("T")


@dataclass
class Registry(Generic[T]):
    _items: Dict[str, T]
    _missing: type = KeyError
    _kind: str = "item"

    def get(self, name: str) -> T:
        if name not in self._items:
            raise self._missing(f"Unknown {self._kind} '{name}'. Available: {sorted(self._items)}")
        return self._items[name]

    def list(self) -> List[str]:
        return sorted(self._items.keys())

    def register(self, name: str, item: T, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._items):
            raise DuplicateNameError(f"{self._kind.capitalize()} '{name}' already exists. Use overwrite=True to replace.")
        self._items[name] = item

    def __contains__(self, name: str) -> bool:
        return name in self._items


def calendar_registry(calendars: Dict[str, Calendar]) -> "Registry[Calendar]":
    return Registry(dict(calendars), UnknownCalendarError, "calendar")


def timezone_registry(zones: Dict[str, "Timezone"]) -> "Registry[Timezone]":
    return Registry(dict(zones), UnknownTimezoneError, "timezone")
