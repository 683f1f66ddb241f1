# ephemeris/skyfield_adapter.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

from ..core.errors import EphemerisUnavailableError, SearchError
from ..core.search import bisect_moment
from ..reference.astro_args import MEAN_SYNODIC_MONTH, MEAN_TROPICAL_YEAR, wrap180, wrap_deg
from . import require_ephemeris

LOGGER = logging.getLogger(__name__)

EPHEMERIS_ENV = "LUNISOLAR_EPHEMERIS"


@dataclass
class SkyfieldEphemeris:
    """
    Ephemeris backed by a JPL SPK kernel (e.g. de440s.bsp) through skyfield.

    Requires optional deps:
      pip install "lunisolar[ephemeris]"
    """
    kernel: Any
    ts: Any
    name: str = "skyfield"

    @classmethod
    def load(cls, path: Optional[str] = None) -> "SkyfieldEphemeris":
        require_ephemeris()
        from skyfield.api import load, load_file

        path = path or os.environ.get(EPHEMERIS_ENV)
        if not path:
            raise EphemerisUnavailableError(
                f"No JPL kernel configured; pass a path or set {EPHEMERIS_ENV}"
            )
        try:
            kernel = load_file(path)
        except (OSError, ValueError) as e:
            raise EphemerisUnavailableError(f"Cannot load JPL kernel {path!r}: {e}") from e
        LOGGER.info("loaded JPL kernel %s", path)
        return cls(kernel=kernel, ts=load.timescale())

    # --------------------------
    # time helpers
    # --------------------------

    def _time(self, moment: float):
        return self.ts.ut1_jd(moment - 0.5)

    @staticmethod
    def _moment(t) -> float:
        return float(t.ut1) + 0.5

    # --------------------------
    # sun
    # --------------------------

    def solar_longitude(self, moment: float) -> float:
        from skyfield.framelib import ecliptic_frame

        t = self._time(moment)
        apparent = self.kernel["earth"].at(t).observe(self.kernel["sun"]).apparent()
        _, lon, _ = apparent.frame_latlon(ecliptic_frame)
        return float(lon.degrees) % 360.0

    def solar_longitude_after(self, lam: float, moment: float) -> float:
        rate = MEAN_TROPICAL_YEAR / 360.0
        tau = moment + rate * wrap_deg(lam - self.solar_longitude(moment))
        return bisect_moment(
            max(moment, tau - 5.0),
            tau + 5.0,
            lambda t: wrap_deg(self.solar_longitude(t) - lam) < 180.0,
        )

    def estimate_prior_solar_longitude(self, lam: float, moment: float) -> float:
        rate = MEAN_TROPICAL_YEAR / 360.0
        tau = moment - rate * wrap_deg(self.solar_longitude(moment) - lam)
        delta = wrap180(self.solar_longitude(tau) - lam)
        return min(moment, tau - rate * delta)

    # --------------------------
    # moon
    # --------------------------

    def lunar_phase(self, moment: float) -> float:
        from skyfield import almanac

        return float(almanac.moon_phase(self.kernel, self._time(moment)).degrees) % 360.0

    def _new_moons(self, start: float, end: float):
        from skyfield import almanac

        times, phases = almanac.find_discrete(
            self._time(start), self._time(end), almanac.moon_phases(self.kernel)
        )
        return [self._moment(t) for t, y in zip(times, phases) if y == 0]

    def new_moon_before(self, moment: float) -> float:
        found = [m for m in self._new_moons(moment - MEAN_SYNODIC_MONTH - 2.0, moment) if m < moment]
        if not found:
            raise SearchError(f"no new moon found before moment {moment}")
        return found[-1]

    def new_moon_at_or_after(self, moment: float) -> float:
        found = [m for m in self._new_moons(moment, moment + MEAN_SYNODIC_MONTH + 2.0) if m >= moment]
        if not found:
            raise SearchError(f"no new moon found at or after moment {moment}")
        return found[0]
