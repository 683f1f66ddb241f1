"""
lunisolar.engines.interfaces
----------------------------
Boundary between the calendar engine and the astronomy it consumes.

Time reference:
All moments are UT, expressed as JDN + fraction of the day since midnight, so
that JD(UT) = moment - 0.5. Longitudes are apparent geocentric degrees in [0, 360).
"""

from __future__ import annotations

from typing import Protocol


class EphemerisProtocol(Protocol):
    """
    Solar and lunar events needed by the calendar engine.
    Implementations must be pure functions of time.
    """

    def solar_longitude(self, moment: float) -> float:
        """Apparent solar longitude (degrees) at a UT moment."""
        ...

    def solar_longitude_after(self, lam: float, moment: float) -> float:
        """First UT moment on or after `moment` when the solar longitude equals `lam`."""
        ...

    def estimate_prior_solar_longitude(self, lam: float, moment: float) -> float:
        """Approximate UT moment at or before `moment` when the solar longitude was `lam`."""
        ...

    def new_moon_before(self, moment: float) -> float:
        """UT moment of the last new moon strictly before `moment`."""
        ...

    def new_moon_at_or_after(self, moment: float) -> float:
        """UT moment of the first new moon at or after `moment`."""
        ...

    def lunar_phase(self, moment: float) -> float:
        """Moon minus Sun longitude (degrees in [0, 360)) at a UT moment."""
        ...
