from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol

from .types import DayInfo, LunisolarDate

LOGGER = logging.getLogger(__name__)

class CalendarProtocol(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def day_info(self, d: date, *, debug: bool = False) -> DayInfo: ...
    def to_gregorian(self, t: LunisolarDate) -> date: ...
    def explain(self, d: date) -> Dict[str, Any]: ...

@dataclass
class CalendarRegistry:
    _calendars: Dict[str, CalendarProtocol]

    def get(self, name: str) -> CalendarProtocol:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(self, name: str, calendar: CalendarProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        LOGGER.debug("registering calendar %r (overwrite=%s)", name, overwrite)
        self._calendars[name] = calendar
