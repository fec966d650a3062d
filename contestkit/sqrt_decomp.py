"""Square-root decomposition for range-minimum queries with point updates."""

from __future__ import annotations

from math import isqrt
from typing import Iterable

INF = 1 << 30


def _block_length(n: int) -> int:
    root = isqrt(n)
    length = root if root * root == n else root + 1
    return max(1, length)


class SqrtDecomposition:
    """Range minimum over positions ``1..n`` split into blocks of about sqrt(n).

    ``values`` are taken in order as positions ``1..n``; with ``one_based``
    the first element of ``values`` is a placeholder and is skipped. Without
    values every position starts at 0. Empty ranges give :data:`INF`.
    """

    def __init__(
        self,
        n: int = 0,
        values: Iterable[int] | None = None,
        one_based: bool = False,
    ) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.block = _block_length(n)
        if values is None:
            items = [0] * n
        else:
            items = list(values)
            if one_based:
                items = items[1:]
            if len(items) < n:
                raise ValueError(f"expected at least {n} values, got {len(items)}")
            items = items[:n]
        self._values = [0, *items]
        self._blocks: list[int] = []
        self.build()

    def build(self) -> None:
        """Recompute the minimum of every block from the stored values."""
        self._blocks = [INF] * (self.n // self.block + 1)
        for position, value in enumerate(self._values[1:], start=1):
            block = position // self.block
            self._blocks[block] = min(self._blocks[block], value)

    def _check(self, index: int) -> None:
        if not 1 <= index <= self.n:
            raise IndexError(f"position {index} is outside 1..{self.n}")

    def update_fast(self, index: int, value: int) -> None:
        """Set a position in O(1), folding the value into its block minimum.

        Correct only when the new value does not raise the block minimum,
        for instance when values only ever decrease.
        """
        self._check(index)
        block = index // self.block
        self._blocks[block] = min(self._blocks[block], value)
        self._values[index] = value

    def update(self, index: int, value: int) -> None:
        """Set a position and recompute the minimum of its block."""
        self._check(index)
        self._values[index] = value
        block = index // self.block
        start = max(1, block * self.block)
        stop = min(block * self.block + self.block - 1, self.n)
        self._blocks[block] = min(self._values[start:stop + 1], default=INF)

    def query(self, left: int, right: int) -> int:
        """Minimum over positions ``left..right`` inclusive."""
        if left > right:
            return INF
        self._check(left)
        self._check(right)
        result = INF
        length = self.block
        while left < right and left % length != 0:
            result = min(result, self._values[left])
            left += 1
        while left + length <= right:
            result = min(result, self._blocks[left // length])
            left += length
        if left <= right:
            result = min(result, min(self._values[left:right + 1]))
        return result