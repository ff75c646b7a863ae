"""earthcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401,E402

from .api import (  # noqa: E402
    DateClock,
    instant,
    instant_dc,
    from_posix,
    to_posix,
    format_dc,
    list_calendars,
    get_calendar,
    register_calendar,
    list_timezones,
    get_timezone,
    register_timezone,
)
from .core.engine import Calendar  # noqa: E402
from .core.timescale import Timescale  # noqa: E402
from .core.types import Clock, Date, Duration, Instant, MIDNIGHT  # noqa: E402
from .engines.combinators import combine, year_shift  # noqa: E402
from .engines.earth import earth_calendar  # noqa: E402
from .engines.solar import SolarParams, is_leap, solar_calendar, solar_ecalendar  # noqa: E402
from .engines.specs import GREGORIAN, HOLOCENE, ISO, JULIAN, JULIAN_GREGORIAN  # noqa: E402
from .engines.timezone import UTC_ZONE, Timezone, fixed_offset  # noqa: E402
from .reference.leap_seconds import TAI, TT, UTC  # noqa: E402

__all__ = [
    "DateClock",
    "instant",
    "instant_dc",
    "from_posix",
    "to_posix",
    "format_dc",
    "list_calendars",
    "get_calendar",
    "register_calendar",
    "list_timezones",
    "get_timezone",
    "register_timezone",
    "Calendar",
    "Timescale",
    "Clock",
    "Date",
    "Duration",
    "Instant",
    "MIDNIGHT",
    "combine",
    "year_shift",
    "earth_calendar",
    "SolarParams",
    "is_leap",
    "solar_calendar",
    "solar_ecalendar",
    "GREGORIAN",
    "HOLOCENE",
    "ISO",
    "JULIAN",
    "JULIAN_GREGORIAN",
    "UTC_ZONE",
    "Timezone",
    "fixed_offset",
    "TAI",
    "TT",
    "UTC",
]
