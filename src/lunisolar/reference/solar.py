# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.search import bisect_moment
from . import astro_args as aa
from . import time_scales as ts


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar coordinates (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_coordinates(jd_tt: float) -> SolarCoordinates:
    """
    Computes true and apparent solar longitude for a given JD(TT)
    using truncated series expansions (accurate to ~0.01 deg).
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    fa = aa.fundamental_args(T)

    M_rad = math.radians(sm.M_deg)

    # Equation of center
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )

    L_true = aa.wrap_deg(sm.L0_deg + C_sun)

    # Aberration and leading nutation term
    Omega_rad = math.radians(fa.Omega_deg)
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def solar_longitude(moment: float) -> float:
    """Apparent solar longitude (degrees) at a UT moment."""
    return solar_coordinates(ts.moment_to_jd_tt(moment)).L_app_deg


def solar_longitude_after(lam: float, moment: float) -> float:
    """
    UT moment of the first time on or after `moment` when the apparent solar
    longitude is `lam` degrees. The mean-motion estimate is refined by
    bisection over a ±5 day window.
    """
    rate = aa.MEAN_TROPICAL_YEAR / 360.0
    tau = moment + rate * aa.wrap_deg(lam - solar_longitude(moment))
    lo = max(moment, tau - 5.0)
    hi = tau + 5.0
    return bisect_moment(lo, hi, lambda t: aa.wrap_deg(solar_longitude(t) - lam) < 180.0)


def estimate_prior_solar_longitude(lam: float, moment: float) -> float:
    """
    Approximate UT moment at or before `moment` when the solar longitude
    was `lam` degrees (within a day or so).
    """
    rate = aa.MEAN_TROPICAL_YEAR / 360.0
    tau = moment - rate * aa.wrap_deg(solar_longitude(moment) - lam)
    delta = aa.wrap180(solar_longitude(tau) - lam)
    return min(moment, tau - rate * delta)
