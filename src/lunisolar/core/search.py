from __future__ import annotations
from typing import Callable

from .errors import SearchError


def next_int(start: int, pred: Callable[[int], bool], *, limit: int = 400) -> int:
    """First integer n >= start with pred(n). Bounded forward walk."""
    n = start
    for _ in range(limit):
        if pred(n):
            return n
        n += 1
    raise SearchError(f"no match within {limit} steps from {start}")


def bisect_moment(
    lo: float,
    hi: float,
    pred: Callable[[float], bool],
    *,
    tol: float = 1e-5,
) -> float:
    """
    Bisection for the boundary of a monotone predicate on [lo, hi]:
    pred is False below the boundary and True at and above it.
    """
    for _ in range(200):
        if hi - lo <= tol:
            break
        mid = 0.5 * (lo + hi)
        if pred(mid):
            hi = mid
        else:
            lo = mid
    return 0.5 * (lo + hi)


def newton_root(f: Callable[[float], float], *, t0: float, h: float = 1e-3, tol: float = 1e-7, iters: int = 12) -> float:
    """Newton's method with a central-difference derivative (float lane)."""
    t = t0
    for _ in range(iters):
        ft = f(t)
        slope = (f(t + h) - f(t - h)) / (2.0 * h)
        if slope == 0.0:
            raise SearchError(f"flat derivative at t={t}")
        step = ft / slope
        t -= step
        if abs(step) < tol:
            return t
    raise SearchError(f"no convergence within {iters} iterations from t0={t0}")
