"""Nearest greater and smaller elements by monotonic stacks.

Each function returns indices. A missing next element is reported as
``len(nums)``; a missing previous element as ``-1``.
"""

from __future__ import annotations

from typing import Callable, Sequence


def _scan(
    nums: Sequence[int],
    order: range,
    blocks: Callable[[int, int], bool],
    missing: int,
) -> list[int]:
    result = [missing] * len(nums)
    stack: list[int] = []
    for i in order:
        while stack and not blocks(nums[stack[-1]], nums[i]):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def next_greater(nums: Sequence[int]) -> list[int]:
    """Index of the first strictly greater element to the right of each."""
    return _scan(nums, range(len(nums) - 1, -1, -1), lambda top, cur: top > cur, len(nums))


def previous_greater(nums: Sequence[int]) -> list[int]:
    """Index of the nearest strictly greater element to the left of each."""
    return _scan(nums, range(len(nums)), lambda top, cur: top > cur, -1)


def next_smaller(nums: Sequence[int]) -> list[int]:
    """Index of the first strictly smaller element to the right of each."""
    return _scan(nums, range(len(nums) - 1, -1, -1), lambda top, cur: top < cur, len(nums))


def previous_smaller(nums: Sequence[int]) -> list[int]:
    """Index of the nearest strictly smaller element to the left of each."""
    return _scan(nums, range(len(nums)), lambda top, cur: top < cur, -1)