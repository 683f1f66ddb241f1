from __future__ import annotations

import argparse
from datetime import date
import logging
import math
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _fmt_moment(moment: float) -> str:
    """Local moment -> 'YYYY-MM-DD HH:MM'."""
    from lunisolar.core.time import gregorian_from_jdn

    day = math.floor(moment)
    minutes = int(round((moment - day) * 1440.0))
    if minutes == 1440:
        day, minutes = day + 1, 0
    y, m, d = gregorian_from_jdn(day)
    return f"{y:04d}-{m:02d}-{d:02d} {minutes // 60:02d}:{minutes % 60:02d}"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def cmd_day(argv: list[str]) -> int:
    import lunisolar

    p = argparse.ArgumentParser(prog="lunisolar day", description="Gregorian -> lunisolar day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", default="chinese")
    p.add_argument("--debug", action="store_true")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    info = lunisolar.day_info(_parse_ymd(args.date), calendar=args.calendar, attributes=tuple(args.attr), debug=args.debug)
    print(f"{info.civil_date.isoformat()}  JDN {info.jdn}  [{info.calendar.name}]")
    print(f"  year {info.date.year} (cycle {info.cycle}, year {info.cyclic_year})")
    print(f"  month {info.date.month} (lunar month {info.lunar_month}), day {info.date.day}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k}: {v}")
    for k, v in (info.debug or {}).items():
        print(f"  [debug] {k}: {v}")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    import lunisolar
    from lunisolar import LeapMonth

    p = argparse.ArgumentParser(prog="lunisolar lunar", description="Traditional lunar date -> Gregorian")
    p.add_argument("year", type=int, help="elapsed year of the calendar (e.g. 4660 for Chinese 2023)")
    p.add_argument("month", type=int, help="lunar month 1..12")
    p.add_argument("day", type=int)
    p.add_argument("--leap", action="store_true", help="the leap month following MONTH")
    p.add_argument("--calendar", default="chinese")
    args = p.parse_args(argv)

    lunar_month = LeapMonth(args.month) if args.leap else args.month
    res = lunisolar.new(args.year, lunar_month, args.day, calendar=args.calendar)
    if not res:
        print(f"invalid date: {res.reason}", file=sys.stderr)
        return 1
    g = lunisolar.to_gregorian(res)
    print(f"{args.year}-{lunar_month}-{args.day} -> ordinal month {res.month} -> {g.isoformat()}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    import lunisolar
    from lunisolar.core.time import from_jdn, to_jdn
    from lunisolar.reference import solar
    from lunisolar.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="lunisolar solar", description="Solar longitude and solar terms at local midnight.")
    p.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--calendar", default="chinese")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date) if args.date else date.today()
    cal = lunisolar.get_calendar(args.calendar)
    jdn = to_jdn(d)
    midnight = ts.universal_from_standard(jdn, cal.location(jdn).utc_offset)

    coords = solar.solar_coordinates(ts.moment_to_jd_tt(midnight))
    print(f"Local midnight {d.isoformat()} [{args.calendar}] = JD_UT {ts.moment_to_jd(midnight):.6f}")
    print(f"  True Longitude     (L_true) = {coords.L_true_deg:.6f}")
    print(f"  Apparent Longitude (L_app)  = {coords.L_app_deg:.6f}")
    print(f"  Major solar term = {cal.current_major_solar_term(jdn)}")
    print(f"  Minor solar term = {cal.current_minor_solar_term(jdn)}")
    print(f"  Next major term  : {_fmt_moment(cal.major_solar_term_on_or_after(jdn))} local")
    print(f"  Next minor term  : {_fmt_moment(cal.minor_solar_term_on_or_after(jdn))} local")
    print(f"  December solstice on or before: {from_jdn(cal.december_solstice_on_or_before(jdn)).isoformat()}")
    return 0


def cmd_moon(argv: list[str]) -> int:
    import lunisolar
    from lunisolar.core.time import from_jdn, to_jdn
    from lunisolar.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="lunisolar moon", description="Lunar phase and surrounding new moons.")
    p.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    p.add_argument("--calendar", default="chinese")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date) if args.date else date.today()
    cal = lunisolar.get_calendar(args.calendar)
    jdn = to_jdn(d)
    midnight = ts.universal_from_standard(jdn, cal.location(jdn).utc_offset)
    eph = cal.ephemeris

    prev_nm = eph.new_moon_before(midnight)
    next_nm = eph.new_moon_at_or_after(midnight)
    print(f"Local midnight {d.isoformat()} [{args.calendar}]")
    print(f"  Phase angle (Moon - Sun) = {eph.lunar_phase(midnight):.4f} deg")
    print(f"  Previous new moon : {_fmt_moment(prev_nm)} UT, month day 1 = {from_jdn(cal.new_moon_before(jdn + 1)).isoformat()}")
    print(f"  Next new moon     : {_fmt_moment(next_nm)} UT, month day 1 = {from_jdn(cal.new_moon_on_or_after(jdn + 1)).isoformat()}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shortcut: `lunisolar YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="lunisolar", description="Chinese, Korean and Japanese lunisolar calendar CLI.")
    p.add_argument("--log-level", default="WARNING", choices=_LOG_LEVELS)
    sub = p.add_subparsers(dest="cmd", required=True)

    # day
    p_day = sub.add_parser("day", help="Gregorian -> lunisolar day label")
    p_day.add_argument("date", help="YYYY-MM-DD")
    p_day.add_argument("--calendar", default="chinese")
    p_day.add_argument("--debug", action="store_true")
    p_day.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")

    p_lunar = sub.add_parser("lunar", help="Traditional lunar date -> Gregorian")
    p_lunar.add_argument("year", type=int)
    p_lunar.add_argument("month", type=int)
    p_lunar.add_argument("day", type=int)
    p_lunar.add_argument("--leap", action="store_true")
    p_lunar.add_argument("--calendar", default="chinese")

    # diagnostics
    sub.add_parser("pretty-month", help="Print lunar/Gregorian month calendars (diagnostics)")
    sub.add_parser("new-years", help="Print New Year table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["leap-months", "round-trip"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-ref"], help="Which ephemeris diagnostic to run")

    # astronomy tools
    sub.add_parser("solar", help="Solar longitude and solar terms at local midnight.")
    sub.add_parser("moon", help="Lunar phase and surrounding new moons.")

    args, rest = p.parse_known_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "day":
        day_argv = [args.date, "--calendar", args.calendar]
        if args.debug:
            day_argv += ["--debug"]
        for a in args.attr:
            day_argv += ["--attr", a]
        day_argv += rest
        return cmd_day(day_argv)

    if args.cmd == "lunar":
        lunar_argv = [str(args.year), str(args.month), str(args.day), "--calendar", args.calendar]
        if args.leap:
            lunar_argv += ["--leap"]
        return cmd_lunar(lunar_argv + rest)

    if args.cmd == "pretty-month":
        return _run_module_main("lunisolar.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("lunisolar.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "leap-months": "lunisolar.diagnostics.leap_months",
            "round-trip": "lunisolar.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate-ref": "lunisolar.diagnostics.ephem.validate_reference",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "solar":
        return cmd_solar(rest)

    if args.cmd == "moon":
        return cmd_moon(rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
