"""Coordinate compression: map values to their 1-based rank among distinct values."""

from __future__ import annotations

from bisect import bisect_right
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


class CoordinateCompressor(Generic[T]):
    """Collects values, then ranks them; call :meth:`build` after adding."""

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self.compressed: list[T] = []
        if values is not None:
            self.compressed = list(values)
            self.build()

    def add(self, value: T) -> None:
        """Collect ``value``; takes effect at the next :meth:`build`."""
        self.compressed.append(value)

    def build(self) -> None:
        """Sort and deduplicate the collected values."""
        self.compressed = sorted(set(self.compressed))

    def get(self, value: T) -> int:
        """Number of distinct values not greater than ``value``.

        For a collected value this is its 1-based rank.
        """
        return bisect_right(self.compressed, value)

    def compress(self, values: Iterable[T]) -> list[int]:
        """Rank of each value."""
        return [self.get(value) for value in values]

    def mapping(self, values: Iterable[T]) -> list[T | None]:
        """List indexed by rank giving back a value of that rank; index 0 is ``None``."""
        result: list[T | None] = [None] * (len(self.compressed) + 1)
        for value in values:
            result[self.get(value)] = value
        return result