# tests/test_timezone.py

import logging
import random
from fractions import Fraction

import earthcal
from earthcal.core.types import Clock, Date, Duration, Instant
from earthcal.engines.specs import ISO, ISO_TT
from earthcal.engines.timezone import UTC_ZONE, Timezone, fixed_offset, offset_name, resolve


def test_fixed_offset_names_and_signs():
    assert fixed_offset(-8).name == "UTC-8"
    assert fixed_offset(5, 30).name == "UTC+5:30"
    assert fixed_offset(-3, 30).name == "UTC-3:30"
    assert fixed_offset(-3, 30).offset_at(Instant(0)) == Duration.of(hours=-3, minutes=-30)
    assert fixed_offset(5, -45).offset_at(Instant(0)) == Duration.of(hours=5, minutes=45)
    assert fixed_offset(0, -30).offset_at(Instant(0)) == Duration.of(minutes=-30)
    assert fixed_offset(0, -30).name == "UTC-0:30"
    assert fixed_offset(1, name="CET").abbreviation_at(Instant(0)) == "CET"
    assert offset_name(0, 45) == "UTC+0:45"


def test_zero_offset_is_utc():
    assert fixed_offset(0, 0) is UTC_ZONE


def test_utc_minus_8_roundtrip():
    tz = fixed_offset(-8)
    random.seed(42)
    samples = [Instant(Fraction(random.randint(-10**19, 10**19), 10**6)) for _ in range(2000)]
    leap = earthcal.instant(Date(2016, 12, 31), Clock(23, 59, 60))
    samples += [leap + Duration(Fraction(k, 4)) for k in range(-8, 9)]
    for i in samples:
        dc = earthcal.instant_dc(i, tz, ISO)
        assert earthcal.instant(dc.date, dc.clock, tz, ISO) == i


def test_leap_second_in_local_time():
    leap = earthcal.instant(Date(2016, 12, 31), Clock(23, 59, Fraction(121, 2)))
    dc = earthcal.instant_dc(leap, fixed_offset(-8))
    assert dc.date == Date(2016, 12, 31)
    assert dc.clock == Clock(15, 59, Fraction(121, 2))
    dc = earthcal.instant_dc(leap, fixed_offset(1))
    assert dc.date == Date(2017, 1, 1)
    assert dc.clock == Clock(0, 59, Fraction(121, 2))
    assert earthcal.instant(dc.date, dc.clock, fixed_offset(1)) == leap


def test_offset_window_over_leap_is_not_counted_twice():
    # 00:30 at UTC+1 is 23:30 UTC, one hour before a leap second
    got = earthcal.instant(Date(2017, 1, 1), Clock(0, 30), fixed_offset(1))
    assert got == earthcal.instant(Date(2016, 12, 31), Clock(23, 30))


def test_exact_inverse_used_on_leap_free_scale():
    marker = Instant(42)
    tz = Timezone("odd", lambda i: (Duration(0), "ODD"), lambda i: marker)
    assert resolve(Date(2020, 1, 1), Clock(), tz, ISO_TT) == marker
    # on a leap-second scale the two-pass correction decides
    assert resolve(Date(2020, 1, 1), Clock(), tz, ISO) == earthcal.instant(Date(2020, 1, 1))


def test_inverse_returning_none_falls_back():
    off = Duration.of(hours=-8)
    tz = Timezone("PST-ish", lambda i: (off, "PST"), lambda i: None)
    got = resolve(Date(2020, 1, 1), Clock(12), tz, ISO_TT)
    assert got == earthcal.instant(Date(2020, 1, 1), Clock(20), cal=ISO_TT)


def test_fixed_offset_on_tt_calendar_roundtrip():
    tz = fixed_offset(5, 30)
    random.seed(1)
    for _ in range(500):
        i = Instant(Fraction(random.randint(-10**18, 10**18), 1000))
        dc = earthcal.instant_dc(i, tz, ISO_TT)
        assert earthcal.instant(dc.date, dc.clock, tz, ISO_TT) == i


def _us_eastern_2021():
    spring = earthcal.instant(Date(2021, 3, 14), Clock(7))  # 02:00 EST
    fall = earthcal.instant(Date(2021, 11, 7), Clock(6))    # 02:00 EDT
    est = Duration.of(hours=-5)
    edt = Duration.of(hours=-4)

    def utc_offset(i):
        if spring <= i < fall:
            return edt, "EDT"
        return est, "EST"

    return Timezone("US/Eastern-2021", utc_offset)


def test_dst_regular_times():
    tz = _us_eastern_2021()
    assert earthcal.instant(Date(2021, 7, 1), Clock(12), tz) == earthcal.instant(Date(2021, 7, 1), Clock(16))
    assert earthcal.instant(Date(2021, 1, 1), Clock(12), tz) == earthcal.instant(Date(2021, 1, 1), Clock(17))
    dc = earthcal.instant_dc(earthcal.instant(Date(2021, 7, 1), Clock(16)), tz)
    assert (dc.clock, dc.abbreviation, dc.utc_offset) == (Clock(12), "EDT", Duration.of(hours=-4))


def test_dst_ambiguous_time_takes_earlier_instant():
    tz = _us_eastern_2021()
    got = earthcal.instant(Date(2021, 11, 7), Clock(1, 30), tz)
    assert got == earthcal.instant(Date(2021, 11, 7), Clock(5, 30))
    assert earthcal.instant_dc(got, tz).abbreviation == "EDT"


def test_dst_gap_time_takes_earlier_instant():
    tz = _us_eastern_2021()
    got = earthcal.instant(Date(2021, 3, 14), Clock(2, 30), tz)
    assert got == earthcal.instant(Date(2021, 3, 14), Clock(6, 30))
    dc = earthcal.instant_dc(got, tz)
    assert (dc.clock, dc.abbreviation) == (Clock(1, 30), "EST")


def test_resolution_path_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="earthcal.engines.timezone")
    resolve(Date(2021, 7, 1), Clock(12), UTC_ZONE, ISO)
    resolve(Date(2021, 7, 1), Clock(12), fixed_offset(-8), ISO_TT)
    resolve(Date(2021, 7, 1), Clock(12), fixed_offset(-8), ISO)
    resolve(Date(2021, 3, 14), Clock(2, 30), _us_eastern_2021(), ISO)
    messages = [r.getMessage() for r in caplog.records]
    assert any(m.endswith(": utc") for m in messages)
    assert any(m.endswith(": exact inverse") for m in messages)
    assert any("stable" in m for m in messages)
    assert any("-> " in m for m in messages)
