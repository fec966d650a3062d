"""Prefix tree over a fixed alphabet, with counted erasure."""

from __future__ import annotations

from enum import Enum


class Alphabet(Enum):
    """Character set a :class:`Trie` accepts: first character and size."""

    LOWERCASE = ("a", 26)
    UPPERCASE = ("A", 26)
    DIGITS = ("0", 10)

    def __init__(self, first: str, size: int) -> None:
        self.first = first
        self.size = size

    def check(self, char: str) -> None:
        """Raise ``ValueError`` if ``char`` is not in this alphabet."""
        if len(char) != 1 or not 0 <= ord(char) - ord(self.first) < self.size:
            raise ValueError(f"{char!r} is not in the {self.name.lower()} alphabet")


class _Node:
    __slots__ = ("children", "is_word", "freq")

    def __init__(self) -> None:
        self.children: dict[str, _Node] = {}
        self.is_word = False
        self.freq = 0


class Trie:
    """Set of words; each node counts the inserted words passing through it."""

    def __init__(self, alphabet: Alphabet = Alphabet.LOWERCASE) -> None:
        self.alphabet = alphabet
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``."""
        node = self._root
        for char in word:
            self.alphabet.check(char)
            child = node.children.get(char)
            if child is None:
                child = node.children[char] = _Node()
            child.freq += 1
            node = child
        node.is_word = True

    def _walk(self, word: str) -> _Node | None:
        node = self._root
        for char in word:
            self.alphabet.check(char)
            node = node.children.get(char)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted as a whole word."""
        node = self._walk(word)
        return node is not None and node.is_word

    def is_prefix(self, word: str) -> bool:
        """Whether some inserted word starts with ``word``."""
        return self._walk(word) is not None

    def erase(self, word: str) -> bool:
        """Remove one insertion of ``word``; return whether it was present.

        The end node stays marked as a word while other insertions still
        pass through it.
        """
        if not self.search(word):
            return False
        path = [self._root]
        for char in word:
            path.append(path[-1].children[char])
        path[-1].is_word = path[-1].freq > 1
        for parent, char in reversed(list(zip(path, word))):
            child = parent.children[char]
            child.freq -= 1
            if child.freq == 0:
                del parent.children[char]
        return True