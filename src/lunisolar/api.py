from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Union

from .core.engine import CalendarRegistry
from .core.types import CalendarSpec, DayInfo, InvalidDate, LunarMonth, LunisolarDate
from .core.time import from_jdn
from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .attributes.registry import compute_attributes
from .engines.calendar import LunisolarCalendar
from .engines.factory import make_calendar as _make_calendar

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    return _reg().get(calendar).info()

def day_info(
    d: date,
    *,
    calendar: str = "chinese",
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> DayInfo:
    cal = _reg().get(calendar)
    info = cal.day_info(d, debug=debug)
    if attributes:
        attrs = compute_attributes(info, attributes, cal)
        info = replace(info, attributes=attrs)
    return info

def to_gregorian(t: LunisolarDate, *, calendar: Optional[str] = None) -> date:
    cal = _reg().get(calendar) if calendar is not None else _reg().get(t.calendar.name)
    return cal.to_gregorian(t)

def explain(d: date, *, calendar: str = "chinese") -> Dict[str, Any]:
    return _reg().get(calendar).explain(d)

def new(year: int, lunar_month: LunarMonth, day: int, *, calendar: str = "chinese") -> Union[LunisolarDate, InvalidDate]:
    return _reg().get(calendar).new(year, lunar_month, day)

def get_calendar(name: str, *, epoch: Optional[int] = None, location: Any = None) -> LunisolarCalendar:
    """Build a fresh calendar from a registered spec, optionally overriding epoch (JDN) or location."""
    from .engines.specs import ALL_SPECS
    if name not in ALL_SPECS:
        raise KeyError(f"Unknown calendar spec '{name}'. Available: {sorted(ALL_SPECS)}")
    spec = ALL_SPECS[name]

    changes: Dict[str, Any] = {}
    if epoch is not None:
        changes["epoch"] = epoch
    if location is not None:
        if not callable(location):
            raise ValueError("location must be callable: moment -> Location")
        changes["location"] = location
    if changes:
        spec = spec.tweak(**changes)

    return _make_calendar(spec)

def make_calendar(spec: CalendarSpec) -> LunisolarCalendar:
    return _make_calendar(spec)

def register_calendar(name: str, calendar: LunisolarCalendar, *, overwrite: bool = False) -> None:
    _reg().register(name, calendar, overwrite=overwrite)

# ============================================================
# Year / month tables
# ============================================================

def new_year_day(year: int, *, calendar: str = "chinese", as_date: bool = True) -> dict:
    cal = _reg().get(calendar)
    jdn = cal.new_year(year)
    out = {"year": year, "jdn": jdn, "cyclic_year": cal.cyclic_year(year), "months": cal.months_in_year(year)}
    if as_date:
        out["date"] = from_jdn(jdn)
    return out

def leap_month_table(start: int, end: int, *, calendar: str = "chinese") -> List[Dict[str, Any]]:
    """One row per elapsed year in [start, end]: leap month (ordinal and traditional) or None."""
    cal = _reg().get(calendar)
    rows = []
    for year in range(start, end + 1):
        leap = cal.leap_month(year)
        rows.append({
            "year": year,
            "new_year": from_jdn(cal.new_year(year)),
            "leap_month": leap,
            "lunar_month": cal.lunar_month_of_year(year, leap) if leap is not None else None,
        })
    return rows

def month_bounds(year: int, month: int, *, calendar: str = "chinese", as_date: bool = True) -> dict:
    cal = _reg().get(calendar)
    first_jdn = cal.date_to_jdn(year, month, 1)
    last_jdn = first_jdn + cal.days_in_month(year, month) - 1
    out = {
        "year": year,
        "month": month,
        "lunar_month": cal.lunar_month_of_year(year, month),
        "first_jdn": first_jdn,
        "last_jdn": last_jdn,
    }
    if as_date:
        out["first_date"] = from_jdn(first_jdn)
        out["last_date"] = from_jdn(last_jdn)
    return out
