"""
lunisolar.engines.solar_terms
-----------------------------
Solar terms evaluated at local midnight of a calendar's reference site.

Major terms (zhongqi) sit at multiples of 30 degrees of solar longitude,
minor terms (jieqi) halfway between. Term 1 is Yushui (330 deg), so the
term containing the December solstice (270 deg) is 11.
"""

from __future__ import annotations

import math

from ..core.arith import amod
from ..core.search import next_int
from ..core.types import LocationFn
from ..reference.time_scales import standard_from_universal, universal_from_standard
from .interfaces import EphemerisProtocol

WINTER = 270.0


def midnight_in_location(jdn: int, location: LocationFn) -> float:
    """UT moment of local standard midnight starting day `jdn`."""
    return universal_from_standard(jdn, location(jdn).utc_offset)


def solar_longitude_at(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> float:
    return eph.solar_longitude(midnight_in_location(jdn, location))


def current_major_solar_term(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> int:
    """Index 1..12 of the last major term at or before local midnight of `jdn`."""
    s = solar_longitude_at(jdn, location, eph)
    return amod(2 + math.floor(s / 30.0), 12)


def current_minor_solar_term(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> int:
    """Index 1..12 of the last minor term at or before local midnight of `jdn`."""
    s = solar_longitude_at(jdn, location, eph)
    return amod(3 + math.floor((s - 15.0) / 30.0), 12)


def solar_longitude_on_or_after(lam: float, jdn: int, location: LocationFn, eph: EphemerisProtocol) -> float:
    """Local standard moment of the first time on or after `jdn` the Sun reaches `lam`."""
    tee = eph.solar_longitude_after(lam, midnight_in_location(jdn, location))
    return standard_from_universal(tee, location(tee).utc_offset)


def major_solar_term_on_or_after(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> float:
    s = solar_longitude_at(jdn, location, eph)
    lam = (30.0 * math.ceil(s / 30.0)) % 360.0
    return solar_longitude_on_or_after(lam, jdn, location, eph)


def minor_solar_term_on_or_after(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> float:
    s = solar_longitude_at(jdn, location, eph)
    lam = (30.0 * math.ceil((s - 15.0) / 30.0) + 15.0) % 360.0
    return solar_longitude_on_or_after(lam, jdn, location, eph)


def december_solstice_on_or_before(jdn: int, location: LocationFn, eph: EphemerisProtocol) -> int:
    """
    Local day of the last December solstice on or before `jdn`.
    The inverse-longitude estimate lands within a day or two; a forward walk
    finds the day on which the Sun crosses 270 deg before the next midnight.
    """
    approx = eph.estimate_prior_solar_longitude(WINTER, midnight_in_location(jdn + 1, location))
    return next_int(
        math.floor(approx) - 1,
        lambda day: WINTER < eph.solar_longitude(midnight_in_location(day + 1, location)),
        limit=30,
    )
