"""
lunisolar.engines.factory
-------------------------
Transforms pure data specifications into live calendar objects.
"""

from __future__ import annotations

from ..core.types import CalendarSpec
from .calendar import LunisolarCalendar


def make_calendar(spec: CalendarSpec) -> LunisolarCalendar:
    """The universal entry point."""
    if not isinstance(spec, CalendarSpec):
        raise TypeError(f"Expected CalendarSpec, got {type(spec).__name__}")
    if not callable(spec.location):
        raise TypeError("CalendarSpec.location must be callable: moment -> Location")
    for op in ("solar_longitude", "new_moon_before", "new_moon_at_or_after"):
        if not hasattr(spec.ephemeris, op):
            raise TypeError(f"CalendarSpec.ephemeris lacks '{op}'")
    return LunisolarCalendar(spec)
