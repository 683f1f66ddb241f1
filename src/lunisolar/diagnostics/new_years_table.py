from __future__ import annotations

from datetime import date
import argparse
from typing import List, Tuple

import lunisolar


DEFAULT_CALENDARS: List[Tuple[str, str]] = [
    ("Chinese", "chinese"),
    ("Korean", "korean"),
    ("Japanese", "japanese"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_calendars(arg: str) -> List[Tuple[str, str]]:
    """
    Parse calendar list from CLI.
    Example:
      --calendars "China=chinese,Korea=korean"
    If you pass just calendar names, labels are the capitalized names:
      --calendars "chinese,japanese"
    """
    items = [x.strip() for x in arg.split(",") if x.strip()]
    out: List[Tuple[str, str]] = []
    for it in items:
        if "=" in it:
            name, cal = it.split("=", 1)
            out.append((name.strip(), cal.strip()))
        else:
            out.append((it.capitalize(), it))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the lunar New Year date per Gregorian year for several calendars."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--calendars",
        type=str,
        default="",
        help='Comma list like "China=chinese,Korea=korean" (default: chinese, korean, japanese).',
    )
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    cals = [(name, lunisolar.get_calendar(key)) for name, key in calendars]

    headers = ["Year"] + [name for name, _ in cals]
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    disagreements: list[tuple[int, list[str]]] = []

    for gy in range(Y0, Y1 + 1):
        row = [str(gy).ljust(colw[0])]
        seen = set()
        for (name, cal), w in zip(cals, colw[1:]):
            d = cal.new_year_for_gregorian_year(gy)
            seen.add(d)
            year = cal.year_for_gregorian_year(gy)
            leap = "*" if cal.is_leap_year(year) else ""
            row.append((fmt(d) + leap).ljust(w))
        print("  ".join(row))
        if len(seen) > 1:
            disagreements.append((gy, [r.strip() for r in row[1:]]))

    print("\n(* = 13-month year)")
    print("Years where the calendars disagree:")
    if not disagreements:
        print("(none)")
        return 0
    for gy, cells in disagreements:
        print(f"{gy}  " + "  ".join(cells))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
