"""2D difference array that counts how many rectangles cover each cell."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable


class PartialSum2D:
    """Counts rectangle coverage on a 1-based ``rows`` x ``cols`` grid."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self._diff = [[0] * (cols + 2) for _ in range(rows + 2)]
        self._grid = [[0] * (cols + 2) for _ in range(rows + 2)]

    def build(self, rectangles: Iterable[tuple[int, int, int, int]]) -> None:
        """Add one to every cell of each rectangle ``(x1, y1, x2, y2)``.

        Corners may be given in any order; bounds are inclusive.
        """
        for x1, y1, x2, y2 in rectangles:
            x1, x2 = sorted((x1, x2))
            y1, y2 = sorted((y1, y2))
            if x1 < 1 or y1 < 1 or x2 > self.rows or y2 > self.cols:
                raise IndexError(f"rectangle {(x1, y1, x2, y2)} is outside the grid")
            self._diff[x2][y2] += 1
            self._diff[x2][y1 - 1] -= 1
            self._diff[x1 - 1][y2] -= 1
            self._diff[x1 - 1][y1 - 1] += 1
        self._recompute()

    def _recompute(self) -> None:
        row_suffix = [list(accumulate(reversed(row)))[::-1] for row in self._diff]
        grid = []
        below = [0] * (self.cols + 2)
        for row in reversed(row_suffix):
            below = [a + b for a, b in zip(row, below)]
            grid.append(below)
        grid.reverse()
        self._grid = grid

    def get(self, x: int, y: int) -> int:
        """Return how many rectangles cover cell ``(x, y)``."""
        return self._grid[x][y]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(value) for value in row[1:self.cols + 1])
            for row in self._grid[1:self.rows + 1]
        )