from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import lunisolar
from lunisolar.core.types import LeapMonth


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def weeks_of(first: date, cells: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    """Lay out consecutive day cells in Monday-first week rows."""
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = [cell("", "") for _ in range(first.weekday())]
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        wk += [cell("", "")] * (7 - len(wk))
        weeks.append(wk)
    return weeks


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def lunar_month_calendar(calendar: str, year: int, lunar_month) -> None:
    cal = lunisolar.get_calendar(calendar)
    t = cal.new_or_raise(year, lunar_month, 1)
    b = lunisolar.month_bounds(year, t.month, calendar=calendar)
    d0, d1 = b["first_date"], b["last_date"]

    cells = []
    d = d0
    while d <= d1:
        cells.append(cell(f"{(d - d0).days + 1:2d}", f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)

    title = f"{calendar} lunar month  Y={year}  M={lunar_month} (ordinal {t.month})   ({d0} .. {d1})"
    print_grid(title, weeks_of(d0, cells))


def gregorian_month_calendar(calendar: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])

    cells = []
    d = first
    while d <= last:
        info = lunisolar.day_info(d, calendar=calendar)
        lm = info.lunar_month
        label = f"{lm.month:02d}L" if isinstance(lm, LeapMonth) else f"{lm:02d}"
        cells.append(cell(f"{d.day:2d}", f"{label}-{info.date.day:02d}"))
        d += timedelta(days=1)

    title = f"{calendar} Gregorian month  {gy}-{gm:02d}"
    print_grid(title, weeks_of(first, cells))


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a lunar-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--calendar", default="chinese", help="chinese|korean|japanese (default: chinese)")

    p.add_argument("--lunar", nargs=2, type=int, metavar=("Y", "M"),
                   help="Lunar month to print: elapsed year and lunar month (e.g. 4660 2)")
    p.add_argument("--leap", action="store_true",
                   help="If set, print the leap month following M.")

    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2023 3)")

    args = p.parse_args(argv)

    if not args.lunar and not args.greg:
        # default demo: leap month 2 of the 2023 year
        year = lunisolar.get_calendar(args.calendar).year_for_gregorian_year(2023)
        lunar_month_calendar(args.calendar, year, LeapMonth(2))
        gregorian_month_calendar(args.calendar, gy=2023, gm=3)
        return 0

    if args.lunar:
        year, month = args.lunar
        lunar_month_calendar(args.calendar, year, LeapMonth(month) if args.leap else month)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.calendar, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
