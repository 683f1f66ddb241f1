"""
lunisolar.engines.locations
---------------------------
Reference sites and historical UTC offsets of the calendar variants.

A location function maps a moment to the `Location` used for every
astronomical query at that moment, so the resolver is re-evaluated per event.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.time import jdn_from_gregorian
from ..core.types import Location
from ..reference.time_scales import angle, hours_to_days


@dataclass(frozen=True)
class Site:
    latitude: float   # degrees north
    longitude: float  # degrees east
    altitude: float   # metres


@dataclass(frozen=True)
class Era:
    """Offset (and optionally a different site) in force from `start_jdn` on."""
    start_jdn: Optional[int]  # None = since forever
    utc_offset_hours: float
    site: Optional[Site] = None


@dataclass(frozen=True)
class HistoricalLocation:
    """Callable location resolver built from a base site and sorted eras."""
    name: str
    site: Site
    eras: Tuple[Era, ...]

    def __post_init__(self) -> None:
        if not self.eras or self.eras[0].start_jdn is not None:
            raise ValueError("first era must be open-ended (start_jdn=None)")
        starts = [e.start_jdn for e in self.eras[1:]]
        if any(s is None for s in starts) or starts != sorted(starts):
            raise ValueError("eras must be sorted by start_jdn")

    @classmethod
    def fixed(cls, name: str, latitude: float, longitude: float, altitude: float, utc_offset_hours: float) -> "HistoricalLocation":
        return cls(name=name, site=Site(latitude, longitude, altitude), eras=(Era(None, utc_offset_hours),))

    def era_at(self, moment: float) -> Era:
        day = math.floor(moment)
        current = self.eras[0]
        for era in self.eras[1:]:
            if day < era.start_jdn:
                break
            current = era
        return current

    def __call__(self, moment: float) -> Location:
        era = self.era_at(moment)
        site = era.site or self.site
        return Location(
            latitude=site.latitude,
            longitude=site.longitude,
            altitude=site.altitude,
            utc_offset=hours_to_days(era.utc_offset_hours),
        )


# ============================================================
# Variants
# ============================================================

BEIJING = Site(angle(39, 55), angle(116, 25), 43.5)

CHINA_LOCATION = HistoricalLocation(
    name="beijing",
    site=BEIJING,
    eras=(
        Era(None, 1397 / 180),  # Beijing local mean time
        Era(jdn_from_gregorian(1929, 1, 1), 8.0),
    ),
)

SEOUL = Site(angle(37, 34), angle(126, 58), 0.0)

KOREA_LOCATION = HistoricalLocation(
    name="seoul",
    site=SEOUL,
    eras=(
        Era(None, 3809 / 450),  # Seoul local mean time
        Era(jdn_from_gregorian(1908, 4, 1), 8.5),
        Era(jdn_from_gregorian(1912, 1, 1), 9.0),
        Era(jdn_from_gregorian(1954, 3, 21), 8.5),
        Era(jdn_from_gregorian(1961, 8, 10), 9.0),
    ),
)

TOKYO = Site(35.7, angle(139, 46), 24.0)

JAPAN_LOCATION = HistoricalLocation(
    name="tokyo",
    site=TOKYO,
    eras=(
        Era(None, 9 + 143 / 450),  # Tokyo local mean time
        Era(jdn_from_gregorian(1888, 1, 1), 9.0, Site(35.0, 135.0, 0.0)),
    ),
)
