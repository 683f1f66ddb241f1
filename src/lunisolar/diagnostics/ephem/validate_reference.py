#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional

from lunisolar.core.time import jdn_from_gregorian
from lunisolar.ephemeris.skyfield_adapter import SkyfieldEphemeris
from lunisolar.reference import astro_args as aa
from lunisolar.reference.ephemeris import MEEUS


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "lunisolar[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "lunisolar[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the analytic ephemeris against a JPL kernel (via skyfield).")
    p.add_argument("--kernel", default=None, help="Path to a .bsp kernel (default: $LUNISOLAR_EPHEMERIS)")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--step-days", type=int, default=97)
    p.add_argument("--out-png", default=None, help="Also plot residuals (needs numpy, matplotlib).")
    args = p.parse_args(argv)

    if args.year_end < args.year_start:
        raise SystemExit("--year-end must be >= --year-start")

    print("Loading JPL kernel...")
    ref = SkyfieldEphemeris.load(args.kernel)

    t0 = jdn_from_gregorian(args.year_start, 1, 1)
    t1 = jdn_from_gregorian(args.year_end, 1, 1)
    moments = [float(t) for t in range(t0, t1, args.step_days)]
    print(f"Validating {len(moments)} points from {args.year_start} to {args.year_end}...")

    years: List[float] = []
    err_solar_lon: List[float] = []   # arcsec
    err_new_moon: List[float] = []    # minutes

    for t in moments:
        d_sun = aa.wrap180(MEEUS.solar_longitude(t) - ref.solar_longitude(t)) * 3600.0
        d_nm = (MEEUS.new_moon_at_or_after(t) - ref.new_moon_at_or_after(t)) * 1440.0
        years.append(2000.0 + (t - 2451545.0) / 365.2425)
        err_solar_lon.append(d_sun)
        err_new_moon.append(d_nm)

    def summary(name: str, xs: List[float], unit: str) -> None:
        worst = max(xs, key=abs)
        rms = (sum(x * x for x in xs) / len(xs)) ** 0.5
        print(f"  {name:<22} rms {rms:8.2f} {unit}   worst {worst:+9.2f} {unit}")

    print("Analytic - JPL:")
    summary("solar longitude", err_solar_lon, "arcsec")
    summary("new moon instant", err_new_moon, "min")

    if args.out_png:
        np = _need_numpy()
        plt = _need_matplotlib()
        yrs = np.asarray(years)

        fig, axs = plt.subplots(2, 1, figsize=(12, 7), sharex=True)
        axs[0].scatter(yrs, np.asarray(err_solar_lon), s=2, alpha=0.6, color="orange")
        axs[0].set_title("Apparent Solar Longitude Error (Analytic - JPL)")
        axs[0].set_ylabel("Error (arcsec)")
        axs[0].grid(True, alpha=0.3)

        axs[1].scatter(yrs, np.asarray(err_new_moon), s=2, alpha=0.6, color="blue")
        axs[1].set_title("New Moon Instant Error (Analytic - JPL)")
        axs[1].set_ylabel("Error (minutes)")
        axs[1].set_xlabel("Year")
        axs[1].grid(True, alpha=0.3)

        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
