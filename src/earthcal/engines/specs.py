from __future__ import annotations

from typing import Dict

from ..core.engine import Calendar
from ..core.types import Date
from ..reference.leap_seconds import TAI, TT
from .combinators import combine, year_shift
from .solar import iso_params, julian_params, solar_calendar, solar_ecalendar


# ============================================================
# ERA LABELS
# ============================================================

def common_era(d: Date) -> str:
    return "BCE" if d.year < 0 else "CE"


def anno_domini(d: Date) -> str:
    return "BC" if d.year < 0 else "AD"


def human_era(d: Date) -> str:
    return "HE"


# ============================================================
# SOLAR CALENDARS
# ============================================================

ISO = solar_ecalendar("iso", "ISO 8601 proleptic Gregorian (astronomical years)", iso_params())

GREGORIAN = solar_ecalendar(
    "gregorian",
    "Proleptic Gregorian",
    iso_params(has_year_zero=False),
    show_era=common_era,
)

JULIAN = solar_calendar(
    "julian",
    "Proleptic Julian",
    julian_params(),
    show_era=anno_domini,
)

ISO_TT = solar_ecalendar("iso-tt", "ISO 8601 on Terrestrial Time", iso_params(), timescale=TT)
ISO_TAI = solar_ecalendar("iso-tai", "ISO 8601 on International Atomic Time", iso_params(), timescale=TAI)


# ============================================================
# COMBINED / SHIFTED
# ============================================================

GREGORIAN_REFORM = Date(1582, 10, 15)

JULIAN_GREGORIAN = combine(
    GREGORIAN_REFORM,
    JULIAN,
    GREGORIAN,
    name="julian-gregorian",
    long_name="Julian until 1582-10-04, Gregorian from 1582-10-15",
)

# Human (Holocene) Era: year 1 HE = 10000 BCE = ISO -9999
HOLOCENE = year_shift(-10000, ISO, name="holocene", long_name="Holocene (Human Era)", show_era=human_era)


ALL_CALENDARS: Dict[str, Calendar] = {
    cal.name: cal
    for cal in (ISO, GREGORIAN, JULIAN, ISO_TT, ISO_TAI, JULIAN_GREGORIAN, HOLOCENE)
}
