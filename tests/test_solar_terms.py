# tests/test_solar_terms.py

import math
from datetime import date

import pytest

from lunisolar.core.time import to_jdn
from lunisolar.engines import solar_terms as st
from lunisolar.engines.locations import CHINA_LOCATION
from lunisolar.reference.ephemeris import MEEUS

LOC = CHINA_LOCATION


def j(y, m, d):
    return to_jdn(date(y, m, d))


def test_midnight_in_location():
    # Beijing midnight is 16:00 UT of the previous day
    assert st.midnight_in_location(j(2023, 1, 1), LOC) == pytest.approx(j(2023, 1, 1) - 8.0 / 24.0)


def test_current_terms():
    assert st.current_major_solar_term(j(2023, 1, 1), LOC, MEEUS) == 11
    assert st.current_minor_solar_term(j(2023, 1, 1), LOC, MEEUS) == 11
    assert st.current_major_solar_term(j(2023, 3, 1), LOC, MEEUS) == 1
    assert st.current_major_solar_term(j(2023, 7, 1), LOC, MEEUS) == 5


def test_term_on_or_after():
    # Dahan (300 deg) 2023-01-20, Lichun (315 deg) 2023-02-04
    assert math.floor(st.major_solar_term_on_or_after(j(2023, 1, 6), LOC, MEEUS)) == j(2023, 1, 20)
    assert math.floor(st.minor_solar_term_on_or_after(j(2023, 1, 6), LOC, MEEUS)) == j(2023, 2, 4)
    # Chunfen 2023-03-21 05:24 Beijing
    t = st.solar_longitude_on_or_after(0.0, j(2023, 3, 1), LOC, MEEUS)
    assert math.floor(t) == j(2023, 3, 21)


def test_december_solstice():
    # 2022-12-21 21:48 UT is already 2022-12-22 in Beijing
    assert st.december_solstice_on_or_before(j(2022, 12, 25), LOC, MEEUS) == j(2022, 12, 22)
    assert st.december_solstice_on_or_before(j(2022, 12, 22), LOC, MEEUS) == j(2022, 12, 22)
    # the 2021 solstice fell within minutes of Beijing midnight
    assert st.december_solstice_on_or_before(j(2022, 12, 21), LOC, MEEUS) in (j(2021, 12, 21), j(2021, 12, 22))
    assert st.december_solstice_on_or_before(j(2023, 7, 1), LOC, MEEUS) == j(2022, 12, 22)
