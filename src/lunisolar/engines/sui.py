"""
lunisolar.engines.sui
---------------------
Solstice years (sui) and the lunisolar new year.

A sui runs from the month containing one December solstice to the month
containing the next. It is leap when 13 new moons fall between them; the
first month of a leap sui without a major solar term is then the leap month.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..core.arith import iround
from ..core.errors import SearchError
from ..core.types import LocationFn
from ..reference.astro_args import MEAN_SYNODIC_MONTH
from .interfaces import EphemerisProtocol
from .lunations import new_moon_before, new_moon_on_or_after, no_major_solar_term
from .solar_terms import december_solstice_on_or_before

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Sui:
    prior_month_12: int  # first new moon after the opening solstice
    next_month_11: int   # last new moon before the closing solstice
    is_leap: bool

    @property
    def lunations(self) -> int:
        return iround((self.next_month_11 - self.prior_month_12) / MEAN_SYNODIC_MONTH)


def sui_containing(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> Sui:
    s1 = december_solstice_on_or_before(jdn, location, eph)
    s2 = december_solstice_on_or_before(s1 + 370, location, eph)
    m12 = new_moon_on_or_after(s1 + 1, location, eph)
    next_m11 = new_moon_before(s2 + 1, location, eph)
    is_leap = iround((next_m11 - m12) / MEAN_SYNODIC_MONTH) == 12
    return Sui(prior_month_12=m12, next_month_11=next_m11, is_leap=is_leap)


def new_year_in_sui(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> int:
    """First day of the lunisolar year that starts inside the sui containing `jdn`."""
    sui = sui_containing(jdn, location, eph)
    m12 = sui.prior_month_12
    m13 = new_moon_on_or_after(m12 + 1, location, eph)
    if sui.is_leap and (no_major_solar_term(m12, location, eph) or no_major_solar_term(m13, location, eph)):
        return new_moon_on_or_after(m13 + 1, location, eph)
    return m13


def new_year_on_or_before(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> int:
    new_year = new_year_in_sui(jdn, location, eph)
    if jdn >= new_year:
        return new_year
    # jdn lies between the solstice and the new year: previous sui
    LOGGER.debug("day %d precedes new year %d of its sui; using the previous sui", jdn, new_year)
    return new_year_in_sui(jdn - 180, location, eph)


def is_prior_leap_month(m_prime: int, m: int, location: LocationFn, eph: EphemerisProtocol) -> bool:
    """
    True iff some lunar month starting in [m_prime, m] lacks a major solar term.
    Walks backwards one lunation at a time from `m`.
    """
    for _ in range(15):
        if m < m_prime:
            return False
        if no_major_solar_term(m, location, eph):
            return True
        m = new_moon_before(m, location, eph)
    raise SearchError(f"leap month walk from {m} did not reach {m_prime}")
