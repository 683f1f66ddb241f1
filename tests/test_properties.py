# tests/test_properties.py

import random
from datetime import date

import pytest

from lunisolar.core.time import to_jdn
from lunisolar.core.types import InvalidDate, LeapMonth
from lunisolar.engines import converter as cv
from lunisolar.engines import translator as tr
from lunisolar.engines.specs import ALL_SPECS, CHINESE

# 1000-01-01 .. 2400-12-31
JDN_LO, JDN_HI = to_jdn(date(1000, 1, 1)), to_jdn(date(2400, 12, 31))
SAMPLES = 300

SPEC_NAMES = sorted(ALL_SPECS)


@pytest.mark.parametrize("name", SPEC_NAMES)
def test_jdn_roundtrip(name):
    spec = ALL_SPECS[name]
    rng = random.Random(2024)
    for _ in range(SAMPLES):
        jdn = rng.randint(JDN_LO, JDN_HI)
        year, month, day = cv.date_from_jdn(jdn, spec)
        assert 1 <= month <= 13
        assert 1 <= day <= 30
        assert cv.date_to_jdn(year, month, day, spec) == jdn

        cd = cv.cyclical_date_from_jdn(jdn, spec)
        assert cv.cyclical_date_to_jdn(cd.cycle, cd.year, cd.month, cd.day, spec) == jdn


@pytest.mark.parametrize("name", SPEC_NAMES)
def test_traditional_roundtrip(name):
    spec = ALL_SPECS[name]
    rng = random.Random(7)
    for _ in range(SAMPLES):
        jdn = rng.randint(JDN_LO, JDN_HI)
        year, month, day = cv.date_from_jdn(jdn, spec)
        label = tr.lunar_month_of_year(year, month, spec)
        assert tr.ordinal_month(year, label, spec) == month
        t = tr.new(year, label, day, spec)
        assert (t.year, t.month, t.day) == (year, month, day)

        ml = cv.month_and_leap(jdn, spec)
        assert ml.is_leap == cv.is_leap_month(year, month, spec)
        assert ml.start_of_month == jdn - day + 1


def _years_sampled(spec):
    """Lunisolar years containing 1 June of every 30th Gregorian year 1500..2400."""
    return [cv.date_from_jdn(to_jdn(date(g, 6, 1)), spec)[0] for g in range(1500, 2401, 30)]


@pytest.mark.parametrize("name", SPEC_NAMES)
def test_year_structure(name):
    spec = ALL_SPECS[name]
    for year in _years_sampled(spec):
        n = cv.months_in_year(year, spec)
        assert n in (12, 13)
        assert cv.is_leap_year(year, spec) == (n == 13)

        flags = [cv.is_leap_month(year, m, spec) for m in range(1, n + 1)]
        assert sum(flags) == (1 if n == 13 else 0)

        total = 0
        for m in range(1, n + 1):
            length = cv.days_in_month(year, m, spec)
            assert length in (29, 30)
            total += length
        assert cv.new_year(year, spec) + total == cv.new_year(year + 1, spec)

        leap = tr.leap_month(year, spec)
        if n == 12:
            assert leap is None
            assert tr.ordinal_month(year, LeapMonth(1), spec) == InvalidDate("invalid_leap_month")
        else:
            assert 2 <= leap <= 13
            assert flags[leap - 1]
            assert tr.lunar_month_of_year(year, leap, spec) == LeapMonth(leap - 1)


@pytest.mark.parametrize("year", range(4655, 4663))
def test_recent_chinese_years(year):
    n = cv.months_in_year(year, CHINESE)
    leap = tr.leap_month(year, CHINESE)
    assert (leap is not None) == (n == 13)
    start = cv.new_year(year, CHINESE)
    for m in range(1, n + 1):
        first = cv.date_to_jdn(year, m, 1, CHINESE)
        assert cv.month_and_leap(first, CHINESE).is_leap == (m == leap)
        assert cv.month_and_leap(first, CHINESE).start_of_month == first
        assert first >= start


def test_cyclic_year_of_consecutive_new_years():
    prev = None
    for year in range(4655, 4663):
        jdn = cv.new_year(year, CHINESE)
        cd = cv.cyclical_date_from_jdn(jdn, CHINESE)
        assert (cd.month, cd.day) == (1, 1)
        if prev is not None:
            assert cd.year == prev % 60 + 1
        prev = cd.year
