"""Offline range queries answered in Mo's order."""

from __future__ import annotations

from math import isqrt
from typing import Callable, Iterable, TypeVar

R = TypeVar("R")


def process_queries(
    n: int,
    queries: Iterable[tuple[int, int]],
    add: Callable[[int], None],
    remove: Callable[[int], None],
    answer: Callable[[], R],
) -> list[R]:
    """Answer inclusive 1-based ``(left, right)`` queries over ``n`` positions.

    Queries are visited sorted by the block of their left end, then by their
    right end. The window is moved one position at a time: ``add`` and
    ``remove`` receive 0-based positions entering and leaving it, and
    ``answer`` is called once the window matches a query. Results come back
    in the order the queries were given.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    ranges = list(queries)
    for left, right in ranges:
        if not 1 <= left <= right <= n:
            raise ValueError(f"query ({left}, {right}) is outside 1..{n}")
    block = max(1, isqrt(n))
    order = sorted(
        range(len(ranges)),
        key=lambda i: ((ranges[i][0] - 1) // block, ranges[i][1]),
    )
    results: list[R] = [None] * len(ranges)  # type: ignore[list-item]
    cur_left, cur_right = 0, -1
    for i in order:
        left, right = ranges[i][0] - 1, ranges[i][1] - 1
        while cur_left > left:
            cur_left -= 1
            add(cur_left)
        while cur_right < right:
            cur_right += 1
            add(cur_right)
        while cur_left < left:
            remove(cur_left)
            cur_left += 1
        while cur_right > right:
            remove(cur_right)
            cur_right -= 1
        results[i] = answer()
    return results