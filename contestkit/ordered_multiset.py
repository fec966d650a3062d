"""Multiset with rank and index queries."""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, TypeVar

from sortedcontainers import SortedList

T = TypeVar("T")


class OrderedMultiset(Generic[T]):
    """Sorted multiset with positional access.

    Elements are kept ascending, or descending with ``reverse``. Indices are
    0-based in that order.
    """

    def __init__(self, values: Iterable[T] | None = None, reverse: bool = False) -> None:
        self.reverse = reverse
        self._items: Any = SortedList(values if values is not None else ())

    def insert(self, value: T) -> None:
        """Add one occurrence of ``value``."""
        self._items.add(value)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def erase(self, value: T) -> bool:
        """Remove one occurrence of ``value``; return whether it was present."""
        if value not in self._items:
            return False
        self._items.remove(value)
        return True

    def at(self, index: int) -> T:
        """Element at ``index`` in the multiset's order; negative counts from the end."""
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("multiset index out of range")
        return self._items[size - 1 - index] if self.reverse else self._items[index]

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def first_index(self, value: T) -> int:
        """Index of the first occurrence of ``value``, or -1 if absent."""
        if value not in self._items:
            return -1
        if self.reverse:
            return len(self._items) - self._items.bisect_right(value)
        return self._items.bisect_left(value)

    def last_index(self, value: T) -> int:
        """Index of the last occurrence of ``value``, or -1 if absent."""
        if value not in self._items:
            return -1
        if self.reverse:
            return len(self._items) - self._items.bisect_left(value) - 1
        return self._items.bisect_right(value) - 1

    def count(self, value: T) -> int:
        """Number of occurrences of ``value``."""
        return self._items.bisect_right(value) - self._items.bisect_left(value)

    def clear(self) -> None:
        """Remove every element."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def order_of_key(self, value: T) -> int:
        """Number of elements strictly before ``value`` in the multiset's order."""
        if self.reverse:
            return len(self._items) - self._items.bisect_right(value)
        return self._items.bisect_left(value)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items) if self.reverse else iter(self._items)

    def __repr__(self) -> str:
        return f"OrderedMultiset({list(self)!r}, reverse={self.reverse})"