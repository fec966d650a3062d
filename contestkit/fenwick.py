"""Binary indexed trees for prefix and rectangle sums."""

from __future__ import annotations

from typing import Iterable, Sequence


class FenwickTree:
    """Point-add, range-sum tree over indices ``0..n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self._tree = [0] * (n + 2)

    def build(self, values: Iterable[int]) -> None:
        """Add ``values[i]`` at index ``i`` for each element."""
        for index, value in enumerate(values):
            self.add(index, value)

    def add(self, index: int, value: int) -> None:
        """Add ``value`` at ``index``."""
        if not 0 <= index <= self.n:
            raise IndexError(f"index {index} is outside 0..{self.n}")
        i = index + 1
        while i <= self.n + 1:
            self._tree[i] += value
            i += i & -i

    def prefix_sum(self, index: int) -> int:
        """Sum of indices ``0..index``; 0 for a negative index."""
        if index > self.n:
            raise IndexError(f"index {index} is outside 0..{self.n}")
        total = 0
        i = index + 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def query(self, left: int, right: int) -> int:
        """Sum of indices between ``left`` and ``right`` inclusive, in either order."""
        if left > right:
            left, right = right, left
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


class FenwickTree2D:
    """Point-add, rectangle-sum tree over cells ``(0..rows, 0..cols)``."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("dimensions must be non-negative")
        self.rows = rows
        self.cols = cols
        self._tree = [[0] * (cols + 2) for _ in range(rows + 2)]

    def build(self, matrix: Sequence[Sequence[int]]) -> None:
        """Add ``matrix[i][j]`` at cell ``(i + 1, j + 1)``."""
        for i, row in enumerate(matrix):
            for j, value in enumerate(row):
                self.add(i + 1, j + 1, value)

    def add(self, row: int, col: int, value: int) -> None:
        """Add ``value`` at cell ``(row, col)``."""
        if not (0 <= row <= self.rows and 0 <= col <= self.cols):
            raise IndexError(f"cell {(row, col)} is outside the grid")
        i = row + 1
        while i <= self.rows + 1:
            line = self._tree[i]
            j = col + 1
            while j <= self.cols + 1:
                line[j] += value
                j += j & -j
            i += i & -i

    def prefix_sum(self, row: int, col: int) -> int:
        """Sum of cells ``(0..row, 0..col)``; 0 if either is negative."""
        if row > self.rows or col > self.cols:
            raise IndexError(f"cell {(row, col)} is outside the grid")
        total = 0
        i = row + 1
        while i > 0:
            line = self._tree[i]
            j = col + 1
            while j > 0:
                total += line[j]
                j -= j & -j
            i -= i & -i
        return total

    def query(self, x1: int, y1: int, x2: int, y2: int) -> int:
        """Sum of the rectangle with corners ``(x1, y1)`` and ``(x2, y2)``."""
        x1, x2 = sorted((x1, x2))
        y1, y2 = sorted((y1, y2))
        return (
            self.prefix_sum(x2, y2)
            - self.prefix_sum(x1 - 1, y2)
            - self.prefix_sum(x2, y1 - 1)
            + self.prefix_sum(x1 - 1, y1 - 1)
        )