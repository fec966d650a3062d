"""Binary trie over fixed-width non-negative integers, with counted erasure."""

from __future__ import annotations


class _Node:
    __slots__ = ("children", "freq")

    def __init__(self) -> None:
        self.children: list[_Node | None] = [None, None]
        self.freq = 0


class BinaryTrie:
    """Multiset of integers in ``0 .. 2**bits - 1`` stored bit by bit.

    Each node counts how many inserted values pass through it, so a value
    inserted twice must be erased twice before it disappears.
    """

    def __init__(self, bits: int = 31) -> None:
        if bits < 1:
            raise ValueError("bits must be at least 1")
        self.bits = bits
        self._root = _Node()

    def _path(self, value: int) -> list[int]:
        if not 0 <= value < 1 << self.bits:
            raise ValueError(f"{value} does not fit in {self.bits} bits")
        return [(value >> bit) & 1 for bit in reversed(range(self.bits))]

    def insert(self, value: int) -> None:
        """Add one occurrence of ``value``."""
        node = self._root
        for bit in self._path(value):
            child = node.children[bit]
            if child is None:
                child = node.children[bit] = _Node()
            child.freq += 1
            node = child

    def search(self, value: int) -> bool:
        """Whether at least one occurrence of ``value`` is stored."""
        node: _Node | None = self._root
        for bit in self._path(value):
            node = node.children[bit]
            if node is None:
                return False
        return True

    def erase(self, value: int) -> bool:
        """Remove one occurrence of ``value``; return whether it was present."""
        if not self.search(value):
            return False
        node = self._root
        for bit in self._path(value):
            child = node.children[bit]
            child.freq -= 1
            if child.freq == 0:
                node.children[bit] = None
                break
            node = child
        return True