# tests/test_locations.py

from datetime import date

import pytest

from lunisolar.core.time import to_jdn
from lunisolar.engines.locations import (
    CHINA_LOCATION,
    JAPAN_LOCATION,
    KOREA_LOCATION,
    Era,
    HistoricalLocation,
    Site,
)


def test_china_offsets():
    assert CHINA_LOCATION(to_jdn(date(2000, 1, 1))).utc_offset == pytest.approx(8.0 / 24.0)
    # before 1929 Beijing local mean time (7h 45m 40s)
    assert CHINA_LOCATION(to_jdn(date(1900, 6, 1)) + 0.5).utc_offset == pytest.approx(1397 / 180 / 24)
    assert CHINA_LOCATION(to_jdn(date(1929, 1, 1))).utc_offset == pytest.approx(8.0 / 24.0)
    assert CHINA_LOCATION(to_jdn(date(1928, 12, 31)) + 0.99).utc_offset < 8.0 / 24.0


def test_korea_offsets():
    hours = lambda y, m, d: KOREA_LOCATION(to_jdn(date(y, m, d))).utc_offset * 24.0
    assert hours(1900, 1, 1) == pytest.approx(3809 / 450)
    assert hours(1910, 1, 1) == pytest.approx(8.5)
    assert hours(1950, 1, 1) == pytest.approx(9.0)
    assert hours(1960, 1, 1) == pytest.approx(8.5)
    assert hours(2023, 1, 1) == pytest.approx(9.0)


def test_japan_site_changes():
    old = JAPAN_LOCATION(to_jdn(date(1870, 1, 1)))
    new = JAPAN_LOCATION(to_jdn(date(1900, 1, 1)))
    assert old.longitude == pytest.approx(139.0 + 46.0 / 60.0)
    assert new.longitude == pytest.approx(135.0)
    assert new.utc_offset == pytest.approx(9.0 / 24.0)


def test_fixed_location():
    loc = HistoricalLocation.fixed("utc", 0.0, 0.0, 0.0, 0.0)
    here = loc(2451545.0)
    assert here.utc_offset == 0.0
    assert here.latitude == 0.0
    assert loc.era_at(0.0).start_jdn is None


def test_era_validation():
    site = Site(0.0, 0.0, 0.0)
    with pytest.raises(ValueError):
        HistoricalLocation("bad", site, (Era(10, 1.0),))
    with pytest.raises(ValueError):
        HistoricalLocation("bad", site, ())
    with pytest.raises(ValueError):
        HistoricalLocation("bad", site, (Era(None, 0.0), Era(20, 1.0), Era(10, 2.0)))
