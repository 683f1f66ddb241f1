from __future__ import annotations

from .deltat import delta_t_seconds


# ============================================================
# Moments
# ============================================================
#
# A moment is JDN + fraction of the day since midnight (UT unless stated),
# so floor(moment) is the civil day and JD = moment - 0.5.

def moment_to_jd(moment: float) -> float:
    return moment - 0.5


def jd_to_moment(jd: float) -> float:
    return jd + 0.5


def decimal_year_from_jd(jd: float) -> float:
    """Approximate (proleptic Gregorian) decimal year of a Julian Date; good enough for ΔT."""
    return 2000.0 + (jd - 2451544.5) / 365.2425


# ============================================================
# UT <-> TT (via ΔT)
# ============================================================

def jd_ut_to_jd_tt(jd_ut: float) -> float:
    """TT = UT + ΔT."""
    return jd_ut + delta_t_seconds(decimal_year_from_jd(jd_ut)) / 86400.0


def jd_tt_to_jd_ut(jd_tt: float) -> float:
    """
    Approximate inverse of jd_ut_to_jd_tt. Two fixed-point iterations are
    enough for sub-second consistency since ΔT varies slowly.
    """
    jd_ut = jd_tt
    for _ in range(2):
        jd_ut = jd_tt - delta_t_seconds(decimal_year_from_jd(jd_ut)) / 86400.0
    return jd_ut


def moment_to_jd_tt(moment: float) -> float:
    return jd_ut_to_jd_tt(moment_to_jd(moment))


def jd_tt_to_moment(jd_tt: float) -> float:
    return jd_to_moment(jd_tt_to_jd_ut(jd_tt))


# ============================================================
# Standard (zone) time <-> universal time
# ============================================================

def universal_from_standard(moment: float, utc_offset: float) -> float:
    """Local standard moment -> UT moment; utc_offset in fractional days."""
    return moment - utc_offset


def standard_from_universal(moment: float, utc_offset: float) -> float:
    """UT moment -> local standard moment; utc_offset in fractional days."""
    return moment + utc_offset


def hours_to_days(hours: float) -> float:
    return hours / 24.0


# ============================================================
# Local Mean Time and angles
# ============================================================

def lmt_offset_hours(longitude_deg_east: float) -> float:
    """
    Offset (hours) between UTC and Local Mean Time at given longitude.
      360° -> 24h  =>  1° -> 4 minutes.
    """
    return longitude_deg_east / 15.0


def angle(degrees: float, minutes: float = 0.0, seconds: float = 0.0) -> float:
    """Sexagesimal angle -> decimal degrees."""
    return degrees + minutes / 60.0 + seconds / 3600.0
