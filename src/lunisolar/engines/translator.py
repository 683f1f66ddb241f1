"""
lunisolar.engines.translator
----------------------------
Ordinal months (1..13) <-> traditional lunar months (1..12 plus a leap marker).

The mapping is only meaningful within one year: months after the leap month
are shifted down by one, and the leap month carries the number of the month
it follows.
"""

from __future__ import annotations

from typing import Optional, Union

from ..core.types import CalendarSpec, InvalidDate, LeapMonth, LunarMonth, LunisolarDate
from .converter import date_to_jdn, days_in_month, is_leap_month, month_and_leap, months_in_year


def leap_month(year: int, spec: CalendarSpec) -> Optional[int]:
    """Ordinal number of the leap month of `year`, or None."""
    for month in range(1, months_in_year(year, spec) + 1):
        if is_leap_month(year, month, spec):
            return month
    return None


def lunar_month_of_year(year: int, month: int, spec: CalendarSpec) -> LunarMonth:
    """Traditional notation of ordinal month `month` of `year`."""
    ml = month_and_leap(date_to_jdn(year, month, 1, spec), spec)
    return LeapMonth(ml.lunar_month) if ml.is_leap else ml.lunar_month


def ordinal_month(year: int, lunar_month: LunarMonth, spec: CalendarSpec) -> Union[int, InvalidDate]:
    """Ordinal month of a traditional lunar month in `year`."""
    leap = leap_month(year, spec)
    if isinstance(lunar_month, LeapMonth):
        if not 1 <= lunar_month.month <= 12:
            return InvalidDate("invalid_month")
        if leap is None or lunar_month.month != leap - 1:
            return InvalidDate("invalid_leap_month")
        return leap
    if not 1 <= lunar_month <= 12:
        return InvalidDate("invalid_month")
    if leap is not None and lunar_month >= leap:
        return lunar_month + 1
    return lunar_month


def days_in_lunar_month(year: int, lunar_month: LunarMonth, spec: CalendarSpec) -> Union[int, InvalidDate]:
    month = ordinal_month(year, lunar_month, spec)
    if isinstance(month, InvalidDate):
        return month
    return days_in_month(year, month, spec)


def new(year: int, lunar_month: LunarMonth, day: int, spec: CalendarSpec) -> Union[LunisolarDate, InvalidDate]:
    """
    Date from a traditional lunar month, e.g. new(4660, LeapMonth(2), 1).
    Returns InvalidDate (falsy) for coordinates that name no day.
    """
    month = ordinal_month(year, lunar_month, spec)
    if isinstance(month, InvalidDate):
        return month
    if not 1 <= day <= days_in_month(year, month, spec):
        return InvalidDate("invalid_day")
    return LunisolarDate(calendar=spec.id, year=year, month=month, day=day)
