# reference/lunar.py

from __future__ import annotations

import math
from functools import lru_cache

from ..core.errors import SearchError
from ..core.search import newton_root
from . import astro_args as aa
from . import time_scales as ts
from .solar import solar_coordinates

# (d, m, m', f, coefficient in microdegrees), Meeus table 47.A
LUNAR_LON_TERMS = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, 10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
    (1, 1, 0, 0, 4987),
    (2, -1, 1, 0, 4036),
    (2, 0, 2, 0, 3994),
    (4, 0, 0, 0, 3861),
    (2, 0, -3, 0, 3665),
    (0, 1, -2, 0, -2689),
    (2, 0, -1, 2, -2602),
    (2, -1, -2, 0, 2390),
    (1, 0, 1, 0, -2348),
    (2, -2, 0, 0, 2236),
    (0, 1, 2, 0, -2120),
    (0, 2, 0, 0, -2069),
    (2, -2, -1, 0, 2048),
    (2, 0, 1, -2, -1773),
    (2, 0, 0, 2, -1595),
    (4, -1, -1, 0, 1215),
    (0, 0, 2, 2, -1110),
    (3, 0, -1, 0, -892),
    (2, 1, 1, 0, -810),
    (4, -1, -2, 0, 759),
    (0, 2, -1, 0, -713),
    (2, 2, -1, 0, -700),
    (2, 1, -2, 0, 691),
    (2, -1, 0, -2, 596),
    (4, 0, 1, 0, 549),
    (0, 0, 4, 0, 537),
    (4, -1, 0, 0, 520),
    (1, 0, -2, 0, -487),
    (2, 1, 0, -2, -399),
    (0, 0, 2, -2, -381),
    (1, 1, 1, 0, 351),
    (3, 0, -2, 0, -340),
    (4, 0, -3, 0, 330),
    (2, -1, 2, 0, 327),
    (0, 2, 1, 0, -323),
    (1, 1, -1, 0, 299),
    (2, 0, 3, 0, 294),
    (2, 0, -1, -2, 0),
)


def lunar_longitude(jd_tt: float) -> float:
    """Apparent geocentric lunar longitude (degrees) for a JD(TT)."""
    T = aa.T_centuries(jd_tt)
    fa = aa.fundamental_args(T)
    E = aa.eccentricity_factor(T)

    D = math.radians(fa.D_deg)
    M = math.radians(fa.M_deg)
    Mp = math.radians(fa.Mp_deg)
    F = math.radians(fa.F_deg)

    total = 0.0
    for d, m, mp, f, coef in LUNAR_LON_TERMS:
        if m:
            coef = coef * (E if abs(m) == 1 else E * E)
        total += coef * math.sin(d * D + m * M + mp * Mp + f * F)

    # Venus, Jupiter and flattening perturbations
    A1 = math.radians(119.75 + 131.849 * T)
    A2 = math.radians(53.09 + 479264.290 * T)
    Lp = math.radians(fa.Lp_deg)
    total += 3958.0 * math.sin(A1) + 1962.0 * math.sin(Lp - F) + 318.0 * math.sin(A2)

    L_true = fa.Lp_deg + total * 1e-6
    return aa.wrap_deg(L_true - 0.00478 * math.sin(math.radians(fa.Omega_deg)))


def elongation(jd_tt: float) -> float:
    """Moon minus Sun apparent longitude in [-180, 180)."""
    return aa.wrap180(lunar_longitude(jd_tt) - solar_coordinates(jd_tt).L_app_deg)


def lunar_phase(moment: float) -> float:
    """Lunar phase angle (degrees in [0, 360)) at a UT moment; 0 is new moon."""
    return aa.wrap_deg(elongation(ts.moment_to_jd_tt(moment)))


# ------------------------------------------------------------
# New moons
# ------------------------------------------------------------

@lru_cache(maxsize=8192)
def nth_new_moon(k: int) -> float:
    """
    UT moment of the k-th true new moon (k = 0 is 2000-01-06).
    Newton iteration on the elongation, seeded at the mean phase.
    """
    jde = newton_root(elongation, t0=aa.jde_mean_new_moon(k))
    return ts.jd_tt_to_moment(jde)


def new_moon_at_or_after(moment: float) -> float:
    """UT moment of the first new moon at or after `moment`."""
    k = aa.lunation_index(ts.moment_to_jd(moment)) - 1
    for _ in range(4):
        t = nth_new_moon(k)
        if t >= moment:
            return t
        k += 1
    raise SearchError(f"no new moon found at or after moment {moment}")


def new_moon_before(moment: float) -> float:
    """UT moment of the last new moon strictly before `moment`."""
    k = aa.lunation_index(ts.moment_to_jd(moment)) + 1
    for _ in range(4):
        t = nth_new_moon(k)
        if t < moment:
            return t
        k -= 1
    raise SearchError(f"no new moon found before moment {moment}")
