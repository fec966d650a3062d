"""Sparse table for static range-minimum queries."""

from __future__ import annotations

from typing import Iterable


class SparseTable:
    """Range minimum over positions ``1..n`` of a fixed array.

    With ``one_based`` the first element of ``values`` is a placeholder.
    """

    def __init__(self, values: Iterable[int], one_based: bool = False) -> None:
        items = list(values)
        if one_based:
            items = items[1:]
        self.n = n = len(items)
        log = [0] * (n + 1)
        for i in range(2, n + 1):
            log[i] = log[i >> 1] + 1
        self._log = log
        table = [items]
        for level in range(1, n.bit_length()):
            previous = table[-1]
            half = 1 << (level - 1)
            table.append(
                [min(previous[i], previous[i + half]) for i in range(n - (1 << level) + 1)]
            )
        self._table = table

    def query(self, left: int, right: int, overlap: bool = False) -> int:
        """Minimum over positions ``left..right`` inclusive.

        By default two overlapping power-of-two blocks give the answer in
        O(1); with ``overlap`` set, the range is walked in disjoint blocks in
        O(log n). Both give the same result.
        """
        if not 1 <= left <= right <= self.n:
            raise IndexError(f"range {left}..{right} is outside 1..{self.n}")
        lo, hi = left - 1, right - 1
        if not overlap:
            level = self._log[hi - lo + 1]
            row = self._table[level]
            return min(row[lo], row[hi - (1 << level) + 1])
        parts = []
        for level in reversed(range(len(self._table))):
            if lo + (1 << level) - 1 <= hi:
                parts.append(self._table[level][lo])
                lo += 1 << level
        return min(parts)