"""Diagnostics package.

- diagnostics: calendar tables, leap-month patterns and round-trip checks
- diagnostics.ephem: optional (requires ephemeris extras + a JPL kernel)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_months"]
