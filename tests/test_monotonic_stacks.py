import operator
import random

import pytest

from contestkit.monotonic_stacks import (
    next_greater,
    next_smaller,
    previous_greater,
    previous_smaller,
)


def _brute_next(nums, better):
    return [
        next((j for j in range(i + 1, len(nums)) if better(nums[j], nums[i])), len(nums))
        for i in range(len(nums))
    ]


def _brute_previous(nums, better):
    return [
        next((j for j in range(i - 1, -1, -1) if better(nums[j], nums[i])), -1)
        for i in range(len(nums))
    ]


@pytest.mark.parametrize("seed", range(5))
def test_against_brute_force(seed):
    rng = random.Random(seed)
    nums = [rng.randint(0, 6) for _ in range(25)]
    assert next_greater(nums) == _brute_next(nums, operator.gt)
    assert next_smaller(nums) == _brute_next(nums, operator.lt)
    assert previous_greater(nums) == _brute_previous(nums, operator.gt)
    assert previous_smaller(nums) == _brute_previous(nums, operator.lt)


def test_equal_values_are_not_greater_or_smaller():
    nums = [3, 3, 3]
    assert next_greater(nums) == [len(nums)] * 3
    assert previous_smaller(nums) == [-1] * 3


def test_empty_input():
    assert next_greater([]) == []
    assert previous_greater([]) == []