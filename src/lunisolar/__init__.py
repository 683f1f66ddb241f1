"""lunisolar public API.

Chinese, Korean and Japanese lunisolar calendars computed from new moons and
the December solstice. Most users only need the functions re-exported here.
"""

import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    day_info,
    to_gregorian,
    explain,
    new,
    list_calendars,
    calendar_info,
    get_calendar,
    make_calendar,
    register_calendar,
    new_year_day,
    leap_month_table,
    month_bounds,
)
from .core.errors import InvalidDateError, LunisolarError
from .core.types import CalendarSpec, InvalidDate, LeapMonth, LunisolarDate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "day_info",
    "to_gregorian",
    "explain",
    "new",
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_calendar",
    "register_calendar",
    "new_year_day",
    "leap_month_table",
    "month_bounds",
    "CalendarSpec",
    "InvalidDate",
    "InvalidDateError",
    "LeapMonth",
    "LunisolarDate",
    "LunisolarError",
]
