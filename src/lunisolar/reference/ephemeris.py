"""
lunisolar.reference.ephemeris
-----------------------------
Analytic ephemeris assembled from the truncated solar and lunar series.
No external data is required; accuracy is a few tens of seconds for
conjunctions and solar-term crossings over the historical range.
"""

from __future__ import annotations

from dataclasses import dataclass

from . import lunar, solar


@dataclass(frozen=True)
class MeeusEphemeris:
    name: str = "meeus"

    def solar_longitude(self, moment: float) -> float:
        return solar.solar_longitude(moment)

    def solar_longitude_after(self, lam: float, moment: float) -> float:
        return solar.solar_longitude_after(lam, moment)

    def estimate_prior_solar_longitude(self, lam: float, moment: float) -> float:
        return solar.estimate_prior_solar_longitude(lam, moment)

    def new_moon_before(self, moment: float) -> float:
        return lunar.new_moon_before(moment)

    def new_moon_at_or_after(self, moment: float) -> float:
        return lunar.new_moon_at_or_after(moment)

    def lunar_phase(self, moment: float) -> float:
        return lunar.lunar_phase(moment)


MEEUS = MeeusEphemeris()
