"""Ephemeris adapters/providers (optional).

This package wraps external ephemeris libraries behind the same interface as
the built-in analytic ephemeris. Install with:
  pip install "lunisolar[ephemeris]"
"""

from ..core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "lunisolar[ephemeris]"') from e
