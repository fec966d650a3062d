"""Kadane's algorithm for extreme contiguous subarray sums."""

from __future__ import annotations

from typing import Iterable


def min_subarray_sum(nums: Iterable[int]) -> int:
    """Smallest sum of a non-empty contiguous run of ``nums``."""
    best = None
    current = 0
    for value in nums:
        current += value
        best = current if best is None else min(best, current)
        current = min(current, 0)
    if best is None:
        raise ValueError("nums must not be empty")
    return best


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    best = None
    current = 0
    for value in nums:
        current += value
        best = current if best is None else max(best, current)
        current = max(current, 0)
    if best is None:
        raise ValueError("nums must not be empty")
    return best