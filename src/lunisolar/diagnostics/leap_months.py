#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import lunisolar
from lunisolar.core.types import LeapMonth


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


@dataclass(frozen=True)
class Style:
    label: str
    calendar: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[str, Style] = {
    "chinese": Style("Chinese", "chinese", marker="o", size=22, hollow=False),
    "korean": Style("Korean", "korean", marker="o", size=95, hollow=True),
    "japanese": Style("Japanese", "japanese", marker="s", size=80, hollow=True),
}


def parse_calendars(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= 3):
        raise SystemExit("--calendars must contain 1 to 3 comma-separated calendars")
    return out


def leap_label(calendar: str, gy: int) -> Optional[int]:
    """Cardinal month after which the leap month of the year starting in `gy` falls, or None."""
    cal = lunisolar.get_calendar(calendar)
    year = cal.year_for_gregorian_year(gy)
    leap = cal.leap_month(year)
    if leap is None:
        return None
    lm = cal.lunar_month_of_year(year, leap)
    return lm.month if isinstance(lm, LeapMonth) else lm


def leap_points(calendar: str, start_year: int, end_year: int) -> List[Tuple[int, int]]:
    out = []
    for gy in range(start_year, end_year + 1):
        m = leap_label(calendar, gy)
        if m is not None:
            out.append((gy, m))
    return out


def print_table(calendars: List[str], points: Dict[str, Dict[int, int]], start_year: int, end_year: int) -> None:
    headers = ["Year"] + calendars
    colw = [5] + [max(8, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))
    for gy in range(start_year, end_year + 1):
        cells = [points[c].get(gy) for c in calendars]
        if all(m is None for m in cells):
            continue
        row = [str(gy).ljust(colw[0])]
        row += [("-" if m is None else f"{m}L").ljust(w) for m, w in zip(cells, colw[1:])]
        print("  ".join(row))


def plot_barcode(calendars: List[str], points: Dict[str, Dict[int, int]], start_year: int, end_year: int, out: str, title: str) -> None:
    np = _need_numpy()
    plt = _need_matplotlib()
    from matplotlib.colors import ListedColormap

    fig, ax = plt.subplots(figsize=(16, 3.6))

    # square cell grid
    x_edges = np.arange(start_year - 0.5, end_year + 1.5, 1.0)
    y_edges = np.arange(0.5, 13.5, 1.0)
    Z = np.zeros((12, end_year - start_year + 1), dtype=float)
    ax.pcolormesh(
        x_edges, y_edges, Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors="0.88",
        linewidth=0.6,
        zorder=0,
    )
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel("Gregorian year of new year")
    ax.set_ylabel("Leap month follows month")
    ax.set_yticks([1, 3, 6, 9, 12])

    for c in calendars:
        st = DEFAULT_STYLES[c]
        xs = np.array(sorted(points[c]), dtype=int)
        ms = np.array([points[c][x] for x in xs], dtype=int)
        if st.hollow:
            ax.scatter(xs, ms, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=st.lw, alpha=st.alpha, label=st.label, zorder=5)
        else:
            ax.scatter(xs, ms, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=st.alpha, label=st.label, zorder=5)

    ax.set_title(title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(out, dpi=250)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-month table (and optional barcode plot) across calendars.")
    p.add_argument("--start-year", type=int, default=1990)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--calendars", default="chinese,korean,japanese",
                   help="Comma list of 1-3 calendars (default: chinese,korean,japanese).")
    p.add_argument("--plot", default=None, metavar="PNG", help="Also save a barcode diagram (needs numpy, matplotlib).")
    p.add_argument("--title", default="Leap month pattern across calendars")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    calendars = parse_calendars(args.calendars)
    for c in calendars:
        if c not in DEFAULT_STYLES:
            raise SystemExit(f"Unknown calendar '{c}'. Known: {sorted(DEFAULT_STYLES.keys())}")

    points = {c: dict(leap_points(c, start_year, end_year)) for c in calendars}
    print_table(calendars, points, start_year, end_year)

    if args.plot:
        plot_barcode(calendars, points, start_year, end_year, args.plot, args.title)
        print(f"Saved: {args.plot}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
