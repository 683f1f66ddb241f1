# tests/test_sui.py

from datetime import date

from lunisolar.core.time import to_jdn
from lunisolar.engines import sui
from lunisolar.engines.locations import CHINA_LOCATION
from lunisolar.reference.ephemeris import MEEUS

LOC = CHINA_LOCATION


def j(y, m, d):
    return to_jdn(date(y, m, d))


def test_sui_2022_2023():
    s = sui.sui_containing(j(2023, 1, 10), LOC, MEEUS)
    assert s.prior_month_12 == j(2022, 12, 23)
    assert s.next_month_11 == j(2023, 12, 13)
    assert s.is_leap
    assert s.lunations == 12


def test_plain_sui():
    s = sui.sui_containing(j(2024, 6, 1), LOC, MEEUS)
    assert not s.is_leap
    assert s.lunations == 11


def test_new_years():
    assert sui.new_year_in_sui(j(2023, 1, 10), LOC, MEEUS) == j(2023, 1, 22)
    assert sui.new_year_on_or_before(j(2023, 1, 10), LOC, MEEUS) == j(2022, 2, 1)
    assert sui.new_year_on_or_before(j(2023, 1, 22), LOC, MEEUS) == j(2023, 1, 22)
    assert sui.new_year_on_or_before(j(2021, 12, 31), LOC, MEEUS) == j(2021, 2, 12)


def test_is_prior_leap_month():
    m12 = j(2022, 12, 23)
    assert sui.is_prior_leap_month(m12, j(2023, 4, 20), LOC, MEEUS)
    assert sui.is_prior_leap_month(m12, j(2023, 3, 22), LOC, MEEUS)
    assert not sui.is_prior_leap_month(m12, j(2023, 2, 20), LOC, MEEUS)

