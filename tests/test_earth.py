# tests/test_earth.py

import random
from fractions import Fraction

import earthcal
from earthcal.core.types import Clock, Date, Duration, Instant, MIDNIGHT, ZERO
from earthcal.engines.earth import earth_calendar, split_day
from earthcal.engines.specs import ISO, ISO_TT


def test_split_day():
    assert split_day(Fraction(86399)) == (23, 59, 59)
    assert split_day(Fraction(3661, 1) + Fraction(1, 4)) == (1, 1, Fraction(5, 4))


def test_utc_roundtrip_every_kind_of_instant():
    random.seed(42)
    for _ in range(3000):
        i = Instant(Fraction(random.randint(-10**20, 10**20), 10**9))
        d, c = ISO.instant_to_dc(i, ZERO)
        assert ISO.dc_to_instant(d, c, ZERO) == i


def test_utc_roundtrip_inside_leap_seconds():
    for y, m in [(1972, 7), (1999, 1), (2006, 1), (2012, 7), (2015, 7), (2017, 1)]:
        start = earthcal.instant(Date(y, m, 1)) - Duration(1)
        for k in range(8):
            i = start + Duration(Fraction(k, 8))
            d, c = ISO.instant_to_dc(i, ZERO)
            assert c.hour == 23 and c.minute == 59 and 60 <= c.second < 61
            assert ISO.dc_to_instant(d, c, ZERO) == i


def test_hour_overflow_rolls_into_days():
    assert earthcal.instant(Date(2021, 1, 1), Clock(25, 0, 0)) == earthcal.instant(Date(2021, 1, 2), Clock(1))
    assert earthcal.instant(Date(2021, 1, 1), Clock(-1, 0, 0)) == earthcal.instant(Date(2020, 12, 31), Clock(23))
    assert earthcal.instant(Date(2021, 1, 1), Clock(0, 90, 0)) == earthcal.instant(Date(2021, 1, 1), Clock(1, 30))
    assert earthcal.instant(Date(2021, 2, 28), Clock(48)) == earthcal.instant(Date(2021, 3, 2))


def test_date_overflow_rolls_into_months_and_years():
    assert earthcal.instant(Date(2023, 13, 1)) == earthcal.instant(Date(2024, 1, 1))
    assert earthcal.instant(Date(2023, 1, 33)) == earthcal.instant(Date(2023, 2, 2))
    assert earthcal.instant_dc(earthcal.instant(Date(2023, 1, 33))).date == Date(2023, 2, 2)


def test_seconds_past_sixty_outside_a_leap():
    # no leap second on 2019-06-30: 23:59:60 is simply the next midnight
    assert earthcal.instant(Date(2019, 6, 30), Clock(23, 59, 60)) == earthcal.instant(Date(2019, 7, 1))


def test_timezone_delta_shifts_clock():
    i = earthcal.instant(Date(2020, 3, 1), Clock(3, 30))
    d, c = ISO.instant_to_dc(i, Duration.of(hours=-5))
    assert (d, c) == (Date(2020, 2, 29), Clock(22, 30, 0))
    assert ISO.dc_to_instant(d, c, Duration.of(hours=-5)) == i


def test_day_shift_for_julian_day_numbers():
    jdn = earth_calendar(
        "jdn",
        "Julian Day Number",
        lambda n: Date(0, 1, n),
        lambda d: d.day,
        day_shift=-2451545,
        timescale=ISO_TT.timescale,
    )
    noon = earthcal.instant(Date(2000, 1, 1), Clock(12), cal=ISO_TT)
    d, c = jdn.instant_to_dc(noon, ZERO)
    assert d == Date(0, 1, 2451545)
    assert c == Clock(12, 0, 0)
    assert jdn.dc_to_instant(d, MIDNIGHT, ZERO) == Instant(0)
    assert jdn.date_to_days(Date(0, 1, 2451545)) == 0
