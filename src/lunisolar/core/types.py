from __future__ import annotations
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Callable, Dict, Literal, Optional, Union

@dataclass(frozen=True)
class CalendarId:
    family: Literal["chinese", "korean", "japanese", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class Location:
    """Reference site of a calendar. utc_offset is in fractional days."""
    latitude: float
    longitude: float
    altitude: float
    utc_offset: float

# moment -> Location
LocationFn = Callable[[float], Location]

@dataclass(frozen=True)
class LeapMonth:
    """Traditional notation for the intercalary month inserted after `month`."""
    month: int

    def __str__(self) -> str:
        return f"{self.month}L"

# A traditional lunar month: cardinal 1..12, or LeapMonth(cardinal)
LunarMonth = Union[int, LeapMonth]

@dataclass(frozen=True)
class LunisolarDate:
    """A date with an ordinal month (1..12, or 1..13 in a leap year)."""
    calendar: CalendarId
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class CyclicalDate:
    cycle: int
    year: int
    month: int
    day: int

@dataclass(frozen=True)
class TraditionalDate:
    cycle: int
    year: int
    lunar_month: int
    is_leap_month: bool
    day: int

    @property
    def month_label(self) -> LunarMonth:
        return LeapMonth(self.lunar_month) if self.is_leap_month else self.lunar_month

@dataclass(frozen=True)
class InvalidDate:
    """Failure value returned (not raised) for coordinates that name no day."""
    reason: Literal["invalid_month", "invalid_leap_month", "invalid_day"]

    def __bool__(self) -> bool:
        return False

@dataclass(frozen=True)
class DayInfo:
    civil_date: Optional[date]
    jdn: int
    calendar: CalendarId
    date: LunisolarDate
    cycle: int
    cyclic_year: int
    lunar_month: LunarMonth
    is_leap_month: bool
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a lunisolar calendar."""
    id: CalendarId
    epoch: int          # JDN of the first day of year 1
    location: Any       # LocationFn
    ephemeris: Any      # EphemerisProtocol
    meta: dict = field(default_factory=dict)

    def tweak(self, **kwargs) -> "CalendarSpec":
        return replace(self, **kwargs)
