"""
lunisolar.engines.lunations
---------------------------
Lunar months in local civil days: a month starts on the local day that
contains the new moon.
"""

from __future__ import annotations

import math

from ..core.types import LocationFn
from ..reference.time_scales import standard_from_universal
from .interfaces import EphemerisProtocol
from .solar_terms import current_major_solar_term, midnight_in_location


def _local_day(tee: float, location: LocationFn) -> int:
    return math.floor(standard_from_universal(tee, location(tee).utc_offset))


def new_moon_before(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> int:
    """Local day of the last new moon strictly before local midnight of `jdn`."""
    return _local_day(eph.new_moon_before(midnight_in_location(jdn, location)), location)


def new_moon_on_or_after(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> int:
    """Local day of the first new moon at or after local midnight of `jdn`."""
    return _local_day(eph.new_moon_at_or_after(midnight_in_location(jdn, location)), location)


def no_major_solar_term(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> bool:
    """
    True iff the lunar month starting on `jdn` contains no major solar term,
    i.e. the term index is the same at its start and at the next month's start.
    """
    nxt = new_moon_on_or_after(jdn + 1, location, eph)
    return current_major_solar_term(jdn, location, eph) == current_major_solar_term(nxt, location, eph)
