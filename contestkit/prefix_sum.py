"""2D prefix sums for rectangle-sum queries."""

from __future__ import annotations

from typing import Sequence


class PrefixSum2D:
    """Prefix sums over a matrix; queries use 1-based inclusive coordinates."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        rows = [list(row) for row in matrix]
        self.rows = len(rows)
        self.cols = len(rows[0]) if rows else 0
        if any(len(row) != self.cols for row in rows):
            raise ValueError("all matrix rows must have the same length")
        prefix = [[0] * (self.cols + 1)]
        for row in rows:
            above = prefix[-1]
            line = [0]
            running = 0
            for value, up in zip(row, above[1:]):
                running += value
                line.append(running + up)
            prefix.append(line)
        self._prefix = prefix

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of the rectangle with corners ``(x1, y1)`` and ``(x2, y2)``."""
        x1, x2 = sorted((x1, x2))
        y1, y2 = sorted((y1, y2))
        if x1 < 1 or y1 < 1 or x2 > self.rows or y2 > self.cols:
            raise IndexError(f"rectangle {(x1, y1, x2, y2)} is outside the matrix")
        p = self._prefix
        return p[x2][y2] - p[x1 - 1][y2] - p[x2][y1 - 1] + p[x1 - 1][y1 - 1]

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(value) for value in row[1:]) for row in self._prefix[1:]
        )