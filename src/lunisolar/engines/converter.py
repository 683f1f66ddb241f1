"""
lunisolar.engines.converter
---------------------------
Two-way mapping between JDN and lunisolar coordinates.

Years are counted as elapsed years since the calendar epoch (year 1 starts at
the first new year on or after the epoch). Months are ordinal: 1..12, or 1..13
in a leap year. The leap flag is never stored; `month_and_leap` derives it.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..core.arith import amod, iround
from ..core.types import CalendarSpec, CyclicalDate, TraditionalDate
from ..reference.astro_args import MEAN_SYNODIC_MONTH, MEAN_TROPICAL_YEAR
from .cycle import cycle_and_year, elapsed_years
from .lunations import new_moon_before, new_moon_on_or_after, no_major_solar_term
from .sui import Sui, is_prior_leap_month, new_year_on_or_before, sui_containing


@dataclass(frozen=True)
class MonthAndLeap:
    lunar_month: int      # cardinal 1..12
    start_of_month: int   # JDN of day 1
    is_leap: bool
    sui: Sui


# ---------------------------------------------------------
# Ordinal dates
# ---------------------------------------------------------

def mid_year(year: int, spec: CalendarSpec) -> int:
    """A day near the middle of elapsed year `year`."""
    return math.floor(spec.epoch + (year - 0.5) * MEAN_TROPICAL_YEAR)


def new_year(year: int, spec: CalendarSpec) -> int:
    return new_year_on_or_before(mid_year(year, spec), spec.location, spec.ephemeris)


def date_to_jdn(year: int, month: int, day: int, spec: CalendarSpec) -> int:
    """
    (elapsed year, ordinal month, day) -> JDN. Walks `month - 1` mean
    lunations from the new year and snaps to the actual new moon.
    """
    ny = new_year(year, spec)
    start = new_moon_on_or_after(ny + (month - 1) * 29, spec.location, spec.ephemeris)
    return start + day - 1


def date_from_jdn(jdn: int, spec: CalendarSpec) -> Tuple[int, int, int]:
    """JDN -> (elapsed year, ordinal month, day)."""
    ny = new_year_on_or_before(jdn, spec.location, spec.ephemeris)
    start = new_moon_before(jdn + 1, spec.location, spec.ephemeris)
    year = iround((ny - spec.epoch) / MEAN_TROPICAL_YEAR + 1)
    month = iround((start - ny) / MEAN_SYNODIC_MONTH) + 1
    return year, month, jdn - start + 1


def cyclical_date_to_jdn(cycle: int, year: int, month: int, day: int, spec: CalendarSpec) -> int:
    return date_to_jdn(elapsed_years(cycle, year), month, day, spec)


def cyclical_date_from_jdn(jdn: int, spec: CalendarSpec) -> CyclicalDate:
    year, month, day = date_from_jdn(jdn, spec)
    cycle, cyclic = cycle_and_year(year)
    return CyclicalDate(cycle=cycle, year=cyclic, month=month, day=day)


# ---------------------------------------------------------
# Leap-aware decomposition
# ---------------------------------------------------------

def month_and_leap(jdn: int, spec: CalendarSpec) -> MonthAndLeap:
    """
    Cardinal lunar month of the month containing `jdn`, its first day and
    whether it is the leap month. Months are counted from month 12 of the
    sui; a leap month earlier in the sui shifts the count back by one.
    """
    loc, eph = spec.location, spec.ephemeris
    sui = sui_containing(jdn, loc, eph)
    m12 = sui.prior_month_12
    start = new_moon_before(jdn + 1, loc, eph)

    months = iround((start - m12) / MEAN_SYNODIC_MONTH)
    if sui.is_leap and is_prior_leap_month(m12, start, loc, eph):
        months -= 1

    is_leap = (
        sui.is_leap
        and no_major_solar_term(start, loc, eph)
        and not is_prior_leap_month(m12, new_moon_before(start, loc, eph), loc, eph)
    )
    return MonthAndLeap(lunar_month=amod(months, 12), start_of_month=start, is_leap=is_leap, sui=sui)


def traditional_date_from_jdn(jdn: int, spec: CalendarSpec) -> TraditionalDate:
    """JDN -> (cycle, cyclic year, cardinal month, leap flag, day)."""
    year, _, day = date_from_jdn(jdn, spec)
    cycle, cyclic = cycle_and_year(year)
    ml = month_and_leap(jdn, spec)
    return TraditionalDate(cycle=cycle, year=cyclic, lunar_month=ml.lunar_month, is_leap_month=ml.is_leap, day=day)


# ---------------------------------------------------------
# Year and month structure
# ---------------------------------------------------------

def months_in_year(year: int, spec: CalendarSpec) -> int:
    return iround((new_year(year + 1, spec) - new_year(year, spec)) / MEAN_SYNODIC_MONTH)


def is_leap_year(year: int, spec: CalendarSpec) -> bool:
    return months_in_year(year, spec) == 13


def days_in_month(year: int, month: int, spec: CalendarSpec) -> int:
    start = date_to_jdn(year, month, 1, spec)
    return new_moon_on_or_after(start + 1, spec.location, spec.ephemeris) - start


def is_leap_month(year: int, month: int, spec: CalendarSpec) -> bool:
    """Whether ordinal month `month` of `year` is the leap month."""
    return month_and_leap(date_to_jdn(year, month, 1, spec), spec).is_leap
