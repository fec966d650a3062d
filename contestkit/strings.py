"""String algorithms: prefix function, KMP search and Manacher's palindrome."""

from __future__ import annotations


def prefix_function(pattern: str) -> list[int]:
    """For each position, the length of the longest proper border of ``pattern[:i+1]``."""
    result = [0] * len(pattern)
    k = 0
    for i in range(1, len(pattern)):
        while k > 0 and pattern[k] != pattern[i]:
            k = result[k - 1]
        if pattern[k] == pattern[i]:
            k += 1
        result[i] = k
    return result


def kmp_search(text: str, pattern: str) -> list[int]:
    """Start indices of every occurrence of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    borders = prefix_function(pattern)
    matches = []
    k = 0
    for i, char in enumerate(text):
        while k > 0 and pattern[k] != char:
            k = borders[k - 1]
        if pattern[k] == char:
            k += 1
        if k == len(pattern):
            matches.append(i - k + 1)
            k = borders[k - 1]
    return matches


def longest_palindrome(text: str) -> str:
    """The first longest palindromic substring of ``text``."""
    if not text:
        return ""
    padded = ["\x00", "#"]
    for char in text:
        padded.extend((char, "#"))
    padded.append("\x01")
    radius = [0] * len(padded)
    center = right = 0
    best_len = best_start = 0
    for i in range(1, len(padded) - 1):
        if i < right:
            radius[i] = min(right - i, radius[2 * center - i])
        while padded[i + radius[i] + 1] == padded[i - radius[i] - 1]:
            radius[i] += 1
        if i + radius[i] > right:
            center, right = i, i + radius[i]
        if radius[i] > best_len:
            best_len = radius[i]
            best_start = (i - radius[i] - 1) // 2
    return text[best_start:best_start + best_len]