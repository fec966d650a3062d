"""Sum segment tree with point assignment and range queries."""

from __future__ import annotations

from typing import Iterable


class SegmentTree:
    """Sum over positions ``1..size``, where ``size`` is a power of two >= n.

    With ``one_based`` the first element of any value list passed in is a
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
        while size < n:
            size *= 2
        self.size = size
        self._tree = [0] * (2 * size)
        if items is not None:
            self.build(items)

    def build(self, values: Iterable[int]) -> None:
        """Load ``values`` into the leading positions and recompute sums."""
        items = list(values)
        if self.one_based:
            items = items[1:]
        if len(items) > self.size:
            raise ValueError(f"{len(items)} values do not fit in {self.size} positions")
        self._tree[self.size:self.size + len(items)] = items
        for node in range(self.size - 1, 0, -1):
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]

    def update(self, index: int, value: int) -> None:
        """Assign ``value`` to position ``index``."""
        if not 1 <= index <= self.size:
            raise IndexError(f"position {index} is outside 1..{self.size}")
        node = self.size + index - 1
        self._tree[node] = value
        node //= 2
        while node:
            self._tree[node] = self._tree[2 * node] + self._tree[2 * node + 1]
            node //= 2

    def query(self, left: int, right: int) -> int:
        """Sum over positions ``left..right``; parts outside the tree count as 0."""
        left = max(left, 1)
        right = min(right, self.size)
        if left > right:
            return 0
        lo = left + self.size - 1
        hi = right + self.size
        total = 0
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total

    def get(self, index: int) -> int:
        """Value at a single position."""
        return self.query(index, index)