"""Convex hull trick for minimum of lines inserted with decreasing slopes."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True)
class Line:
    """The line ``y = slope * x + intercept``."""

    slope: int
    intercept: int

    def value(self, x: int) -> int:
        """The line's value at ``x``."""
        return self.slope * x + self.intercept

    def intersect(self, other: Line) -> int:
        """Smallest integer ``x`` from which ``other`` is not above this line.

        Meaningful when ``other`` has the smaller slope.
        """
        denominator = self.slope - other.slope
        if denominator == 0:
            raise ValueError("parallel lines do not intersect")
        return (other.intercept - self.intercept + denominator - 1) // denominator


class ConvexHullTrick:
    """Lower envelope of lines for minimum queries.

    Slopes must be inserted in strictly decreasing order. :meth:`query`
    expects non-decreasing ``x`` across calls and discards lines it passes;
    :meth:`query_binary_search` accepts any order.
    """

    def __init__(self) -> None:
        self._lines: deque[tuple[Line, float]] = deque()

    def __len__(self) -> int:
        return len(self._lines)

    def insert(self, slope: int, intercept: int) -> None:
        """Add the line ``slope * x + intercept``."""
        new_line = Line(slope, intercept)
        if self._lines and slope >= self._lines[-1][0].slope:
            raise ValueError("slopes must be inserted in strictly decreasing order")
        while len(self._lines) > 1 and self._lines[-1][1] >= self._lines[-1][0].intersect(
            new_line
        ):
            self._lines.pop()
        if not self._lines:
            self._lines.append((new_line, -math.inf))
        else:
            self._lines.append((new_line, self._lines[-1][0].intersect(new_line)))

    def query(self, x: int) -> int:
        """Minimum over all lines at ``x``, for non-decreasing ``x``."""
        if not self._lines:
            raise IndexError("query on empty hull")
        while len(self._lines) > 1 and self._lines[1][1] <= x:
            self._lines.popleft()
        return self._lines[0][0].value(x)

    def query_binary_search(self, x: int) -> int:
        """Minimum over all lines at ``x`` without discarding any line."""
        if not self._lines:
            raise IndexError("query on empty hull")
        index = bisect_right(self._lines, x, key=lambda entry: entry[1]) - 1
        return self._lines[index][0].value(x)