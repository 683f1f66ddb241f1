from __future__ import annotations
from typing import Any, Dict

from ..engines import cycle
from .registry import register_attribute

def weekday(info, calendar) -> Dict[str, Any]:
    # Convention: 0=Mon..6=Sun (ISO-like)
    return {"weekday": info.jdn % 7}

def sexagenary_year(info, calendar) -> Dict[str, Any]:
    stem, branch = calendar.year_name(info.date.year)
    return {"year_stem": stem, "year_branch": branch}

def sexagenary_month(info, calendar) -> Dict[str, Any]:
    stem, branch = calendar.month_name(info.date.year, info.date.month)
    return {"month_stem": stem, "month_branch": branch}

def sexagenary_day(info, calendar) -> Dict[str, Any]:
    stem, branch = cycle.day_name(info.jdn)
    return {"day_stem": stem, "day_branch": branch}

def solar_term(info, calendar) -> Dict[str, Any]:
    return {
        "major_solar_term": calendar.current_major_solar_term(info.jdn),
        "minor_solar_term": calendar.current_minor_solar_term(info.jdn),
    }

register_attribute("weekday", weekday)
register_attribute("sexagenary_year", sexagenary_year)
register_attribute("sexagenary_month", sexagenary_month)
register_attribute("sexagenary_day", sexagenary_day)
register_attribute("solar_term", solar_term)
