from __future__ import annotations

import math


def iround(x: float) -> int:
    """Round half up (floor(x + 1/2)), the rounding used throughout the engine."""
    return math.floor(x + 0.5)


def amod(x: int, n: int) -> int:
    """Arithmetic mod giving 1..n instead of 0..n-1."""
    return ((x - 1) % n) + 1
