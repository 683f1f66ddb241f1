from __future__ import annotations
from datetime import date
from typing import Tuple


def jdn_from_gregorian(year: int, month: int, day: int) -> int:
    """
    Proleptic Gregorian (astronomical year numbering, year 0 exists) -> JDN.
    Pure integer arithmetic, so years before 1 CE are accepted.
    """
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def gregorian_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of jdn_from_gregorian."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert a Gregorian date to its Julian Day Number (JDN)."""
    return jdn_from_gregorian(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    """JDN -> datetime.date (only for years 1..9999)."""
    return date(*gregorian_from_jdn(jdn))


def gregorian_year_of(jdn: int) -> int:
    return gregorian_from_jdn(jdn)[0]
