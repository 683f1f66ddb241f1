# tests/test_attributes.py

from datetime import date

import pytest

import lunisolar
from lunisolar.attributes.registry import available_attributes, compute_attributes, register_attribute


def test_standard_attributes_registered():
    assert set(available_attributes()) >= {
        "weekday",
        "sexagenary_year",
        "sexagenary_month",
        "sexagenary_day",
        "solar_term",
    }


def test_day_info_attributes():
    info = lunisolar.day_info(
        date(2023, 1, 22),
        attributes=("weekday", "sexagenary_year", "sexagenary_month", "sexagenary_day", "solar_term"),
    )
    a = info.attributes
    assert a["weekday"] == 6  # Sunday
    assert (a["year_stem"], a["year_branch"]) == (10, 4)
    assert (a["month_stem"], a["month_branch"]) == (1, 3)
    assert (a["day_stem"], a["day_branch"]) == (7, 5)
    assert a["major_solar_term"] == 12
    assert a["minor_solar_term"] == 12


def test_unknown_attribute():
    with pytest.raises(KeyError):
        lunisolar.day_info(date(2023, 1, 22), attributes=("moon_sign",))


def test_custom_attribute():
    register_attribute("jdn_parity", lambda info, cal: {"even": info.jdn % 2 == 0})
    info = lunisolar.day_info(date(2023, 1, 22))
    cal = lunisolar.get_calendar("chinese")
    assert compute_attributes(info, ["jdn_parity"], cal) == {"even": False}
