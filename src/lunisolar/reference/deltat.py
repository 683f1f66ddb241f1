"""
lunisolar.reference.deltat

ΔT (= TT − UT) model used to move between the universal time of the calendar
and the dynamical time of the solar and lunar series.

- Default: the Espenak–Meeus (NASA) piecewise polynomials of the Five Millennium
  Canon, valid across roughly −1999..+3000 and extrapolated by the long-term
  parabola outside that range.
- Optional: a piecewise-linear table given by the LUNISOLAR_DELTAT_TABLE
  environment variable (CSV with columns decimal_year, delta_t_seconds).
  Inside the table range it replaces the polynomial.
"""

from __future__ import annotations

import csv
import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Optional, Tuple

LOGGER = logging.getLogger(__name__)

DELTAT_TABLE_ENV = "LUNISOLAR_DELTAT_TABLE"


# ---------------------------------------------------------------------------
# Table model
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DeltaTTable:
    """
    Piecewise-linear ΔT table over decimal-year coordinate.
    """
    x: Tuple[float, ...]   # decimal years (strictly increasing)
    y: Tuple[float, ...]   # ΔT in seconds

    def __len__(self) -> int:
        return len(self.x)

    def eval(self, xq: float) -> float:
        if not (self.x[0] <= xq <= self.x[-1]):
            raise ValueError(f"x out of range [{self.x[0]}, {self.x[-1]}]: {xq}")
        lo, hi = 0, len(self.x) - 1
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.x[mid] <= xq:
                lo = mid
            else:
                hi = mid
        x0, x1 = self.x[lo], self.x[hi]
        y0, y1 = self.y[lo], self.y[hi]
        if x1 == x0:
            return y0
        t = (xq - x0) / (x1 - x0)
        return y0 + t * (y1 - y0)

    @property
    def range(self) -> Tuple[float, float]:
        return (self.x[0], self.x[-1])


def read_table(rows: Iterable[dict], *, xcol: str = "decimal_year", ycol: str = "delta_t_seconds") -> DeltaTTable:
    xs: list[float] = []
    ys: list[float] = []
    for r in rows:
        xs.append(float(r[xcol]))
        ys.append(float(r[ycol]))
    if len(xs) < 2:
        raise ValueError("ΔT table needs at least two rows")
    for i in range(1, len(xs)):
        if not (xs[i] > xs[i - 1]):
            raise ValueError("ΔT table x is not strictly increasing")
    return DeltaTTable(tuple(xs), tuple(ys))


@lru_cache(maxsize=1)
def load_table() -> Optional[DeltaTTable]:
    """Load the table named by LUNISOLAR_DELTAT_TABLE, or None if unset or unreadable."""
    p = os.environ.get(DELTAT_TABLE_ENV, "").strip()
    if not p:
        return None
    path = Path(p).expanduser()
    if not path.is_file():
        LOGGER.warning("%s points to a missing file: %s", DELTAT_TABLE_ENV, path)
        return None
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return read_table(csv.DictReader(f))
    except (OSError, KeyError, ValueError) as exc:
        LOGGER.warning("ignoring ΔT table %s: %s", path, exc)
        return None


# ---------------------------------------------------------------------------
# Espenak–Meeus (NASA) piecewise polynomial
# ---------------------------------------------------------------------------

def _poly(u: float, coeffs: Tuple[float, ...]) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def delta_t_em2006(y: float) -> float:
    """
    Espenak–Meeus piecewise polynomial ΔT(y) in seconds, y a decimal year.
    """
    if y < -500.0:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u
    elif y < 500.0:
        u = y / 100.0
        dt = _poly(u, (10583.6, -1014.41, 33.78311, -5.952053, -0.1798452, 0.022174192, 0.0090316521))
    elif y < 1600.0:
        u = (y - 1000.0) / 100.0
        dt = _poly(u, (1574.2, -556.01, 71.23472, 0.319781, -0.8503463, -0.005050998, 0.0083572073))
    elif y < 1700.0:
        t = y - 1600.0
        dt = 120.0 - 0.9808 * t - 0.01532 * t * t + (t ** 3) / 7129.0
    elif y < 1800.0:
        t = y - 1700.0
        dt = 8.83 + 0.1603 * t - 0.0059285 * t * t + 0.00013336 * (t ** 3) - (t ** 4) / 1174000.0
    elif y < 1860.0:
        t = y - 1800.0
        dt = _poly(t, (
            13.72, -0.332447, 0.0068612, 0.0041116,
            -0.00037436, 0.0000121272, -0.0000001699, 0.000000000875,
        ))
    elif y < 1900.0:
        t = y - 1860.0
        dt = 7.62 + 0.5737 * t - 0.251754 * (t ** 2) + 0.01680668 * (t ** 3) - 0.0004473624 * (t ** 4) + (t ** 5) / 233174.0
    elif y < 1920.0:
        t = y - 1900.0
        dt = -2.79 + 1.494119 * t - 0.0598939 * (t ** 2) + 0.0061966 * (t ** 3) - 0.000197 * (t ** 4)
    elif y < 1941.0:
        t = y - 1920.0
        dt = 21.20 + 0.84493 * t - 0.076100 * (t ** 2) + 0.0020936 * (t ** 3)
    elif y < 1961.0:
        t = y - 1950.0
        dt = 29.07 + 0.407 * t - (t ** 2) / 233.0 + (t ** 3) / 2547.0
    elif y < 1986.0:
        t = y - 1975.0
        dt = 45.45 + 1.067 * t - (t ** 2) / 260.0 - (t ** 3) / 718.0
    elif y < 2005.0:
        t = y - 2000.0
        dt = _poly(t, (63.86, 0.3345, -0.060374, 0.0017275, 0.000651814, 0.00002373599))
    elif y < 2050.0:
        t = y - 2000.0
        dt = 62.92 + 0.32217 * t + 0.005589 * (t ** 2)
    elif y < 2150.0:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)
    else:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u

    return float(dt)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def delta_t_seconds(y: float, *, method: str = "best") -> float:
    """
    ΔT(y) in seconds, where y is a decimal year.

    method:
      - "best": the configured table when present and in range, else the polynomial.
      - "em2006": polynomial only.
    """
    method = method.lower().strip()
    if method not in {"best", "em2006"}:
        raise ValueError("method must be one of: best, em2006")

    if method == "best":
        tbl = load_table()
        if tbl is not None:
            a, b = tbl.range
            if a <= y <= b:
                return tbl.eval(y)

    return delta_t_em2006(y)
