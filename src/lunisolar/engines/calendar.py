"""
lunisolar.engines.calendar
--------------------------
The orchestrator. Binds one CalendarSpec (epoch, location resolver,
ephemeris) to the engine functions and exposes the calendar operations
on civil dates and Julian Day Numbers.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Tuple, Union

from ..core.errors import InvalidDateError
from ..core.time import from_jdn, gregorian_from_jdn, gregorian_year_of, jdn_from_gregorian, to_jdn
from ..core.types import (
    CalendarSpec,
    CyclicalDate,
    DayInfo,
    InvalidDate,
    LeapMonth,
    LunarMonth,
    LunisolarDate,
    TraditionalDate,
)
from . import converter, cycle, lunations, solar_terms, sui, translator
from .converter import MonthAndLeap

DRAGON_MONTH = 5
DRAGON_DAY = 5


class LunisolarCalendar:
    """
    A lunisolar calendar defined by new moons and the December solstice.
    Years are elapsed years since `spec.epoch`; months are ordinal.
    """

    def __init__(self, spec: CalendarSpec):
        self.spec = spec

    @property
    def id(self):
        return self.spec.id

    @property
    def epoch(self) -> int:
        return self.spec.epoch

    @property
    def location(self):
        return self.spec.location

    @property
    def ephemeris(self):
        return self.spec.ephemeris

    def __repr__(self) -> str:
        return f"LunisolarCalendar({self.id.name!r}, epoch={self.epoch})"

    # ---------------------------------------------------------
    # Ordinal and cyclical dates
    # ---------------------------------------------------------

    def date_to_jdn(self, year: int, month: int, day: int) -> int:
        return converter.date_to_jdn(year, month, day, self.spec)

    def date_from_jdn(self, jdn: int) -> LunisolarDate:
        year, month, day = converter.date_from_jdn(jdn, self.spec)
        return LunisolarDate(calendar=self.id, year=year, month=month, day=day)

    def cyclical_date_to_jdn(self, cycle: int, year: int, month: int, day: int) -> int:
        return converter.cyclical_date_to_jdn(cycle, year, month, day, self.spec)

    def cyclical_date_from_jdn(self, jdn: int) -> CyclicalDate:
        return converter.cyclical_date_from_jdn(jdn, self.spec)

    def traditional_date_from_jdn(self, jdn: int) -> TraditionalDate:
        return converter.traditional_date_from_jdn(jdn, self.spec)

    def month_and_leap(self, jdn: int) -> MonthAndLeap:
        return converter.month_and_leap(jdn, self.spec)

    @staticmethod
    def cycle_and_year(elapsed: int) -> Tuple[int, int]:
        return cycle.cycle_and_year(elapsed)

    @staticmethod
    def elapsed_years(cycle_no: int, year: int) -> int:
        return cycle.elapsed_years(cycle_no, year)

    @staticmethod
    def cyclic_year(year: int) -> int:
        return cycle.cyclic_year(year)

    # ---------------------------------------------------------
    # Leap structure
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        return converter.is_leap_year(year, self.spec)

    def is_leap_month(self, year: int, month: int) -> bool:
        return converter.is_leap_month(year, month, self.spec)

    def leap_month(self, year: int) -> Optional[int]:
        return translator.leap_month(year, self.spec)

    def lunar_month_of_year(self, year: int, month: int) -> LunarMonth:
        return translator.lunar_month_of_year(year, month, self.spec)

    def months_in_year(self, year: int) -> int:
        return converter.months_in_year(year, self.spec)

    def days_in_month(self, year: int, month: int) -> int:
        return converter.days_in_month(year, month, self.spec)

    def days_in_lunar_month(self, year: int, lunar_month: LunarMonth) -> Union[int, InvalidDate]:
        return translator.days_in_lunar_month(year, lunar_month, self.spec)

    def valid_date(self, year: int, month: int, day: int) -> Union[bool, InvalidDate]:
        """True for an existing ordinal date, otherwise the (falsy) reason."""
        if not 1 <= month <= self.months_in_year(year):
            return InvalidDate("invalid_month")
        if not 1 <= day <= self.days_in_month(year, month):
            return InvalidDate("invalid_day")
        return True

    # ---------------------------------------------------------
    # Traditional lunar months
    # ---------------------------------------------------------

    def new(self, year: int, lunar_month: LunarMonth, day: int) -> Union[LunisolarDate, InvalidDate]:
        return translator.new(year, lunar_month, day, self.spec)

    def new_or_raise(self, year: int, lunar_month: LunarMonth, day: int) -> LunisolarDate:
        res = self.new(year, lunar_month, day)
        if isinstance(res, InvalidDate):
            raise InvalidDateError(res.reason, f"no day {day} of lunar month {lunar_month} in year {year}: {res.reason}")
        return res

    # ---------------------------------------------------------
    # New years and Gregorian lookups
    # ---------------------------------------------------------

    def new_year(self, year: int) -> int:
        """JDN of the first day of elapsed year `year`."""
        return converter.new_year(year, self.spec)

    def new_year_on_or_before(self, jdn: int) -> int:
        return sui.new_year_on_or_before(jdn, self.location, self.ephemeris)

    def sui_containing(self, jdn: int) -> sui.Sui:
        return sui.sui_containing(jdn, self.location, self.ephemeris)

    def year_for_gregorian_year(self, gregorian_year: int) -> int:
        """Elapsed year whose new year falls in `gregorian_year`."""
        return converter.date_from_jdn(jdn_from_gregorian(gregorian_year, 7, 1), self.spec)[0]

    def gregorian_date_for_lunar(
        self, gregorian_year: int, lunar_month: LunarMonth, day: int
    ) -> Union[date, InvalidDate]:
        res = self.new(self.year_for_gregorian_year(gregorian_year), lunar_month, day)
        if isinstance(res, InvalidDate):
            return res
        return self.to_gregorian(res)

    def new_year_for_gregorian_year(self, gregorian_year: int) -> date:
        return from_jdn(self.new_year(self.year_for_gregorian_year(gregorian_year)))

    def dragon_festival_for_gregorian_year(self, gregorian_year: int) -> date:
        t = self.new_or_raise(self.year_for_gregorian_year(gregorian_year), DRAGON_MONTH, DRAGON_DAY)
        return self.to_gregorian(t)

    # ---------------------------------------------------------
    # Astronomy in local days
    # ---------------------------------------------------------

    def december_solstice_on_or_before(self, jdn: int) -> int:
        return solar_terms.december_solstice_on_or_before(jdn, self.location, self.ephemeris)

    def current_major_solar_term(self, jdn: int) -> int:
        return solar_terms.current_major_solar_term(jdn, self.location, self.ephemeris)

    def current_minor_solar_term(self, jdn: int) -> int:
        return solar_terms.current_minor_solar_term(jdn, self.location, self.ephemeris)

    def major_solar_term_on_or_after(self, jdn: int) -> float:
        return solar_terms.major_solar_term_on_or_after(jdn, self.location, self.ephemeris)

    def minor_solar_term_on_or_after(self, jdn: int) -> float:
        return solar_terms.minor_solar_term_on_or_after(jdn, self.location, self.ephemeris)

    def new_moon_before(self, jdn: int) -> int:
        return lunations.new_moon_before(jdn, self.location, self.ephemeris)

    def new_moon_on_or_after(self, jdn: int) -> int:
        return lunations.new_moon_on_or_after(jdn, self.location, self.ephemeris)

    def no_major_solar_term(self, jdn: int) -> bool:
        return lunations.no_major_solar_term(jdn, self.location, self.ephemeris)

    # ---------------------------------------------------------
    # Sexagenary names
    # ---------------------------------------------------------

    def year_name(self, year: int) -> cycle.StemBranch:
        return cycle.year_name(gregorian_year_of(self.new_year(year)))

    def month_name(self, year: int, month: int) -> cycle.StemBranch:
        """Name of ordinal month `month`; a leap month shares the name of its predecessor."""
        lm = self.lunar_month_of_year(year, month)
        cardinal = lm.month if isinstance(lm, LeapMonth) else lm
        return cycle.month_name(cardinal, gregorian_year_of(self.new_year(year)))

    @staticmethod
    def day_name(jdn: int) -> cycle.StemBranch:
        return cycle.day_name(jdn)

    # ---------------------------------------------------------
    # High-Level API Methods (Required by CLI / api.py)
    # ---------------------------------------------------------

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "epoch": self.epoch,
            "epoch_date": "%04d-%02d-%02d" % gregorian_from_jdn(self.epoch),
            "location": getattr(self.location, "name", repr(self.location)),
            "ephemeris": getattr(self.ephemeris, "name", type(self.ephemeris).__name__),
            "meta": dict(self.spec.meta),
        }

    def day_info(self, d: date, *, debug: bool = False) -> DayInfo:
        jdn = to_jdn(d)
        lsd = self.date_from_jdn(jdn)
        ml = self.month_and_leap(jdn)
        cycle_no, cyclic = cycle.cycle_and_year(lsd.year)
        label: LunarMonth = LeapMonth(ml.lunar_month) if ml.is_leap else ml.lunar_month

        dbg = None
        if debug:
            dbg = {
                "new_year": self.new_year_on_or_before(jdn),
                "start_of_month": ml.start_of_month,
                "sui": ml.sui.__dict__,
                "major_solar_term": self.current_major_solar_term(jdn),
                "offset_hours": self.location(jdn).utc_offset * 24.0,
            }

        return DayInfo(
            civil_date=d,
            jdn=jdn,
            calendar=self.id,
            date=lsd,
            cycle=cycle_no,
            cyclic_year=cyclic,
            lunar_month=label,
            is_leap_month=ml.is_leap,
            debug=dbg,
        )

    def to_gregorian(self, t: LunisolarDate) -> date:
        return from_jdn(self.date_to_jdn(t.year, t.month, t.day))

    def explain(self, d: date) -> Dict[str, Any]:
        return self.day_info(d, debug=True).__dict__

