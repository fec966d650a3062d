"""Persistent segment tree answering k-th smallest queries over array ranges."""

from __future__ import annotations


class _Node:
    __slots__ = ("count", "left", "right")

    def __init__(self, count: int, left: _Node | None, right: _Node | None) -> None:
        self.count = count
        self.left = left
        self.right = right


_EMPTY = _Node(0, None, None)
_EMPTY.left = _EMPTY
_EMPTY.right = _EMPTY


class PersistentSegmentTree:
    """Value-indexed persistent segment tree.

    Version ``i`` is created from an earlier version by inserting one value.
    Version 0 is empty. A query over versions ``left..right`` looks at the
    values inserted after version ``left - 1`` up to version ``right``.
    """

    def __init__(self, n: int = 0, low: int = -10**9, high: int = 10**9) -> None:
        if low > high:
            raise ValueError("low must not exceed high")
        if n < 0:
            raise ValueError("n must be non-negative")
        self.low = low
        self.high = high
        self._roots: list[_Node] = [_EMPTY] * (n + 1)

    def _insert(self, node: _Node, value: int, lo: int, hi: int) -> _Node:
        if value < lo or value > hi:
            return node
        if lo == hi:
            return _Node(node.count + 1, _EMPTY, _EMPTY)
        mid = lo + (hi - lo) // 2
        left = self._insert(node.left, value, lo, mid)
        right = self._insert(node.right, value, mid + 1, hi)
        return _Node(left.count + right.count, left, right)

    def insert(self, index: int, previous: int, value: int) -> None:
        """Create version ``index`` as version ``previous`` plus ``value``.

        Values outside ``[low, high]`` leave the version unchanged.
        """
        self._roots[index] = self._insert(self._roots[previous], value, self.low, self.high)

    def query(self, left: int, right: int, k: int) -> int:
        """Return the k-th smallest (1-based) value among versions ``left..right``."""
        if left < 1:
            raise ValueError("left must be at least 1")
        before = self._roots[left - 1]
        after = self._roots[right]
        total = after.count - before.count
        if not 1 <= k <= total:
            raise IndexError(f"k={k} is outside 1..{total}")
        lo, hi = self.low, self.high
        while lo != hi:
            mid = lo + (hi - lo) // 2
            in_left = after.left.count - before.left.count
            if in_left >= k:
                before, after, hi = before.left, after.left, mid
            else:
                k -= in_left
                before, after, lo = before.right, after.right, mid + 1
        return lo