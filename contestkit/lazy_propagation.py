"""Segment tree with lazy range assignment and range-minimum queries."""

from __future__ import annotations

import math
from typing import Iterable


class LazySegmentTree:
    """Range minimum over positions ``1..size`` with range assignment.

    ``size`` is the smallest power of two greater than ``n``. With
    ``one_based`` the first element of any value list passed in is a
    placeholder and is skipped. Positions past the data hold 0.
    """

    def __init__(
        self,
        n: int = 0,
        values: Iterable[int] | None = None,
        one_based: bool = False,
    ) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.one_based = one_based
        items = None
        if values is not None:
            items = list(values)
            n = max(n, len(items) - (1 if one_based else 0))
        size = 1
        while size <= n:
            size *= 2
        self.size = size
        self._tree: list[float] = [0] * (2 * size)
        self._lazy: list[float | None] = [None] * (2 * size)
        if items is not None:
            self.build(items)

    def build(self, values: Iterable[int]) -> None:
        """Load ``values`` into the leading positions; the rest become 0."""
        items = list(values)
        if self.one_based:
            items = items[1:]
        if len(items) > self.size:
            raise ValueError(f"{len(items)} values do not fit in {self.size} positions")
        leaves = items + [0] * (self.size - len(items))
        self._tree[self.size:] = leaves
        self._lazy = [None] * (2 * self.size)
        for node in range(self.size - 1, 0, -1):
            self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def fill(self, value: int) -> None:
        """Set every position to ``value``."""
        self._tree = [value] * (2 * self.size)
        self._lazy = [None] * (2 * self.size)

    def _apply(self, node: int, value: int) -> None:
        self._tree[node] = value
        if node < self.size:
            self._lazy[node] = value

    def _push(self, node: int) -> None:
        pending = self._lazy[node]
        if pending is not None:
            self._apply(2 * node, pending)
            self._apply(2 * node + 1, pending)
            self._lazy[node] = None

    def _check(self, left: int, right: int) -> None:
        if not 1 <= left <= right <= self.size:
            raise IndexError(f"range {left}..{right} is outside 1..{self.size}")

    def _update(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if right < lo or hi < left:
            return
        if left <= lo and hi <= right:
            self._apply(node, value)
            return
        self._push(node)
        mid = (lo + hi) // 2
        self._update(2 * node, lo, mid, left, right, value)
        self._update(2 * node + 1, mid + 1, hi, left, right, value)
        self._tree[node] = min(self._tree[2 * node], self._tree[2 * node + 1])

    def update(self, left: int, right: int, value: int) -> None:
        """Assign ``value`` to every position in ``left..right``."""
        self._check(left, right)
        self._update(1, 1, self.size, left, right, value)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> float:
        if right < lo or hi < left:
            return math.inf
        if left <= lo and hi <= right:
            return self._tree[node]
        self._push(node)
        mid = (lo + hi) // 2
        return min(
            self._query(2 * node, lo, mid, left, right),
            self._query(2 * node + 1, mid + 1, hi, left, right),
        )

    def query(self, left: int, right: int) -> int:
        """Minimum over positions ``left..right`` inclusive."""
        self._check(left, right)
        return self._query(1, 1, self.size, left, right)