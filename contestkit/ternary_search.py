"""Ternary search for the minimum of a unimodal function."""

from __future__ import annotations

from typing import Callable


def ternary_search_int(func: Callable[[int], int], low: int, high: int) -> int:
    """Minimum of ``func`` over the integers ``low..high``.

    The range is narrowed by ternary search while it is wide, then the last
    few candidates are checked directly.
    """
    if low > high:
        raise ValueError("low must not exceed high")
    while high - low >= 10:
        m1 = low + (high - low) // 3
        m2 = high - (high - low) // 3
        if func(m1) < func(m2):
            high = m2
        else:
            low = m1
    return min(func(x) for x in range(low, high + 1))


def ternary_search_float(
    func: Callable[[float], float],
    low: float,
    high: float,
    eps: float = 1e-9,
) -> float:
    """Minimum of ``func`` over ``[low, high]``, searched to width ``eps``."""
    if low > high:
        raise ValueError("low must not exceed high")
    if eps <= 0:
        raise ValueError("eps must be positive")
    best = float("inf")
    while high - low >= eps:
        m1 = low + (high - low) / 3
        m2 = high - (high - low) / 3
        f1, f2 = func(m1), func(m2)
        best = min(best, f1, f2)
        new_low, new_high = (low, m2) if f1 < f2 else (m1, high)
        if (new_low, new_high) == (low, high):
            break
        low, high = new_low, new_high
    return best