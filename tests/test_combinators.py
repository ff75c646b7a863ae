# tests/test_combinators.py

import pytest

import earthcal
from earthcal.core.types import Clock, Date
from earthcal.engines.combinators import combine, year_shift
from earthcal.engines.specs import GREGORIAN, GREGORIAN_REFORM, HOLOCENE, ISO, JULIAN, JULIAN_GREGORIAN


def test_reform_gap():
    switch_day = GREGORIAN.date_to_days(GREGORIAN_REFORM)
    assert JULIAN_GREGORIAN.days_to_date(switch_day) == Date(1582, 10, 15)
    assert JULIAN_GREGORIAN.days_to_date(switch_day - 1) == Date(1582, 10, 4)
    assert JULIAN.days_to_date(switch_day - 1) == Date(1582, 10, 4)
    assert JULIAN_GREGORIAN.date_to_days(Date(1582, 10, 4)) + 1 == JULIAN_GREGORIAN.date_to_days(Date(1582, 10, 15))


def test_each_side_follows_its_rules():
    switch_day = GREGORIAN.date_to_days(GREGORIAN_REFORM)
    for n in range(switch_day, switch_day + 200000, 97):
        assert JULIAN_GREGORIAN.days_to_date(n) == GREGORIAN.days_to_date(n)
    for n in range(switch_day - 200000, switch_day, 97):
        assert JULIAN_GREGORIAN.days_to_date(n) == JULIAN.days_to_date(n)
    # 1500 is a Julian leap year, 1700 is not a Gregorian one
    assert JULIAN_GREGORIAN.days_in_month(1500, 2) == 29
    assert JULIAN_GREGORIAN.days_in_month(1700, 2) == 28
    assert JULIAN_GREGORIAN.days_in_year(1582) == 355


def test_combined_roundtrip():
    for n in range(-200000, 200001, 3):
        assert JULIAN_GREGORIAN.date_to_days(JULIAN_GREGORIAN.days_to_date(n)) == n


def test_date_in_gap_is_read_as_julian():
    assert JULIAN_GREGORIAN.date_to_days(Date(1582, 10, 10)) == JULIAN.date_to_days(Date(1582, 10, 10))


def test_era_dispatch():
    assert JULIAN_GREGORIAN.show_era(Date(1000, 1, 1)) == "AD"
    assert JULIAN_GREGORIAN.show_era(Date(2000, 1, 1)) == "CE"
    cal = combine(GREGORIAN_REFORM, JULIAN, GREGORIAN, show_era=lambda d: "X")
    assert cal.show_era(Date(1000, 1, 1)) == "X"
    assert cal.name == "julian+gregorian"


def test_combined_instants():
    i = earthcal.instant(Date(1582, 10, 4), Clock(23, 59, 59), cal=JULIAN_GREGORIAN)
    dc = earthcal.instant_dc(i + earthcal.Duration(1), cal=JULIAN_GREGORIAN)
    assert dc.date == Date(1582, 10, 15)
    assert dc.clock == Clock()


def test_year_shift():
    assert HOLOCENE.days_to_date(0) == Date(12000, 1, 1)
    assert HOLOCENE.date_to_days(Date(12000, 1, 1)) == 0
    assert HOLOCENE.date_to_days(Date(10000, 1, 1)) == ISO.date_to_days(Date(0, 1, 1))
    assert HOLOCENE.show_era(Date(12000, 1, 1)) == "HE"
    for n in range(-50000, 50000, 11):
        assert HOLOCENE.date_to_days(HOLOCENE.days_to_date(n)) == n


def test_year_shift_keeps_base_era_and_timescale():
    shifted = year_shift(1, GREGORIAN)
    assert shifted.name == "gregorian-1"
    assert shifted.days_to_date(0) == Date(1999, 1, 1)
    assert shifted.show_era(Date(1999, 1, 1)) == "CE"
    assert shifted.timescale is GREGORIAN.timescale


@pytest.mark.parametrize("shift", [-543, 0, 622, 10000])
def test_year_shift_inverse(shift):
    cal = year_shift(shift, ISO)
    for n in range(-1000, 1000, 37):
        d = cal.days_to_date(n)
        assert d.year == ISO.days_to_date(n).year - shift
        assert cal.date_to_days(d) == n
