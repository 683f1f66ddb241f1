"""
lunisolar.engines.cycle
-----------------------
Sexagenary (60-year) cycle arithmetic and stem/branch names.

Names are returned as (stem, branch) index pairs, stem 1..10 and branch 1..12;
turning them into characters or words is left to the caller.
"""

from __future__ import annotations

from typing import Tuple

from ..core.arith import amod
from ..core.time import jdn_from_gregorian

CYCLE_YEARS = 60

# Chinese elapsed year (epoch -2636) minus the Gregorian year of its new year
CHINESE_YEAR_OFFSET = 2637

StemBranch = Tuple[int, int]

# JDN whose day name is (10, 12); 2000-01-01 is (5, 7)
DAY_NAME_EPOCH = jdn_from_gregorian(1, 1, 1) + 44


def cycle_and_year(elapsed: int) -> Tuple[int, int]:
    """Elapsed years -> (cycle, cyclic year 1..60)."""
    return 1 + (elapsed - 1) // CYCLE_YEARS, amod(elapsed, CYCLE_YEARS)


def elapsed_years(cycle: int, year: int) -> int:
    """(cycle, cyclic year) -> elapsed years since the epoch."""
    return (cycle - 1) * CYCLE_YEARS + year


def cyclic_year(elapsed: int) -> int:
    return amod(elapsed, CYCLE_YEARS)


def stem_and_branch(n: int) -> StemBranch:
    """Name of the n-th element of a sexagenary sequence."""
    return amod(n, 10), amod(n, 12)


def sexagenary_index(name: StemBranch) -> int:
    """Position 1..60 of a (stem, branch) name; stem and branch must share parity."""
    stem, branch = name
    if (stem - branch) % 2:
        raise ValueError(f"({stem}, {branch}) is not a sexagenary name")
    return amod(1 + name_difference((1, 1), name), CYCLE_YEARS)


def name_difference(a: StemBranch, b: StemBranch) -> int:
    """Steps 1..60 forward from name `a` to name `b` (60 when equal)."""
    stem_diff = b[0] - a[0]
    branch_diff = b[1] - a[1]
    return 1 + (stem_diff - 1 + 25 * (branch_diff - stem_diff)) % 60


def year_name(gregorian_year: int) -> StemBranch:
    """Name of the lunisolar year whose new year falls in `gregorian_year` (4 CE is (1, 1))."""
    return stem_and_branch(gregorian_year - 3)


def month_name(month: int, gregorian_year: int) -> StemBranch:
    """Name of cardinal lunar month `month` of the year starting in `gregorian_year`."""
    elapsed_months = 12 * (gregorian_year + CHINESE_YEAR_OFFSET - 1) + (month - 1)
    return stem_and_branch(elapsed_months - 57)


def day_name(jdn: int) -> StemBranch:
    return stem_and_branch(jdn - DAY_NAME_EPOCH)


def day_name_on_or_before(name: StemBranch, jdn: int) -> int:
    """Last day on or before `jdn` carrying the given day name."""
    return jdn - name_difference(name, day_name(jdn)) % CYCLE_YEARS
