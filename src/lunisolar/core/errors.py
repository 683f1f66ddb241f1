from __future__ import annotations

class LunisolarError(Exception):
    """Base error."""

class InvalidDateError(LunisolarError, ValueError):
    """Raised when calendar coordinates do not name an existing day."""

    def __init__(self, reason: str, message: str | None = None):
        self.reason = reason
        super().__init__(message or f"cannot build date, reason: {reason}")

class EphemerisUnavailableError(LunisolarError):
    """Raised when an optional ephemeris backend (e.g. skyfield) is not available."""

class SearchError(LunisolarError, RuntimeError):
    """Raised when a bounded astronomical search runs past its bound."""
