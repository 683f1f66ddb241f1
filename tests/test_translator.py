# tests/test_translator.py

from datetime import date

import pytest

from lunisolar.core.time import to_jdn
from lunisolar.core.types import InvalidDate, LeapMonth, LunisolarDate
from lunisolar.engines import translator as tr
from lunisolar.engines.converter import date_to_jdn
from lunisolar.engines.specs import CHINESE, JAPANESE, KOREAN


def test_leap_month():
    assert tr.leap_month(4657, CHINESE) == 5   # 2020, leap 4
    assert tr.leap_month(4660, CHINESE) == 3   # 2023, leap 2
    assert tr.leap_month(4661, CHINESE) is None
    assert tr.leap_month(4662, CHINESE) == 7   # 2025, leap 6


def test_lunar_month_of_year():
    assert tr.lunar_month_of_year(4660, 2, CHINESE) == 2
    assert tr.lunar_month_of_year(4660, 3, CHINESE) == LeapMonth(2)
    assert tr.lunar_month_of_year(4660, 4, CHINESE) == 3
    assert tr.lunar_month_of_year(4660, 13, CHINESE) == 12


@pytest.mark.parametrize(
    "lunar_month, expected",
    [
        (1, 1),
        (2, 2),
        (LeapMonth(2), 3),
        (3, 4),
        (12, 13),
        (13, InvalidDate("invalid_month")),
        (0, InvalidDate("invalid_month")),
        (LeapMonth(3), InvalidDate("invalid_leap_month")),
        (LeapMonth(13), InvalidDate("invalid_month")),
    ],
)
def test_ordinal_month_leap_year(lunar_month, expected):
    assert tr.ordinal_month(4660, lunar_month, CHINESE) == expected


def test_ordinal_month_common_year():
    assert tr.ordinal_month(4661, 5, CHINESE) == 5
    assert tr.ordinal_month(4661, LeapMonth(2), CHINESE) == InvalidDate("invalid_leap_month")


def test_new():
    d = tr.new(4660, LeapMonth(2), 1, CHINESE)
    assert d == LunisolarDate(CHINESE.id, 4660, 3, 1)
    assert tr.new(4660, 5, 5, CHINESE) == LunisolarDate(CHINESE.id, 4660, 6, 5)

    bad = tr.new(4660, LeapMonth(2), 30, CHINESE)
    assert not bad
    assert bad.reason == "invalid_day"
    assert tr.new(4660, 1, 0, CHINESE) == InvalidDate("invalid_day")


def test_days_in_lunar_month():
    assert tr.days_in_lunar_month(4660, LeapMonth(2), CHINESE) == 29
    assert tr.days_in_lunar_month(4661, LeapMonth(2), CHINESE) == InvalidDate("invalid_leap_month")


def test_korean_buddha_birthday():
    d = tr.new(4356, 4, 8, KOREAN)
    assert d.month == 5
    assert d.day == 8
    assert date_to_jdn(d.year, d.month, d.day, KOREAN) == to_jdn(date(2023, 5, 27))

    prev = tr.new(4355, 4, 8, KOREAN)
    assert prev.month == 4
    assert date_to_jdn(prev.year, prev.month, prev.day, KOREAN) == to_jdn(date(2022, 5, 8))


def test_japanese_leap_years():
    assert tr.leap_month(1379, JAPANESE) == 3
    assert tr.leap_month(1380, JAPANESE) is None
