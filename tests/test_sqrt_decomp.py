import random

import pytest

from contestkit.sqrt_decomp import INF, SqrtDecomposition


@pytest.fixture
def values():
    rng = random.Random(1234)
    return [rng.randint(-50, 50) for _ in range(37)]


def test_every_range_matches_slice_minimum(values):
    sd = SqrtDecomposition(len(values), values)
    for left in range(1, len(values) + 1):
        for right in range(left, len(values) + 1):
            assert sd.query(left, right) == min(values[left - 1:right])


def test_one_based_skips_placeholder():
    data = [999, 5, -3, 8, 2]
    sd = SqrtDecomposition(4, data, one_based=True)
    assert sd.query(1, 1) == data[1]
    assert sd.query(1, 4) == min(data[1:])
    assert sd.query(3, 4) == min(data[3:])


def test_updates_keep_queries_correct(values):
    rng = random.Random(99)
    model = list(values)
    sd = SqrtDecomposition(len(model), model)
    for _ in range(200):
        index = rng.randint(1, len(model))
        value = rng.randint(-100, 100)
        sd.update(index, value)
        model[index - 1] = value
        left = rng.randint(1, len(model))
        right = rng.randint(left, len(model))
        assert sd.query(left, right) == min(model[left - 1:right])


def test_update_fast_with_decreasing_values(values):
    model = list(values)
    sd = SqrtDecomposition(len(model), model)
    for index in range(1, len(model) + 1, 3):
        model[index - 1] -= 200
        sd.update_fast(index, model[index - 1])
    for left in range(1, len(model) + 1, 5):
        for right in range(left, len(model) + 1, 4):
            assert sd.query(left, right) == min(model[left - 1:right])


def test_rebuild_after_construction_is_stable(values):
    sd = SqrtDecomposition(len(values), values)
    sd.build()
    assert sd.query(1, len(values)) == min(values)


def test_default_values_are_zero():
    sd = SqrtDecomposition(10)
    assert sd.query(1, 10) == 0
    sd.update(4, -7)
    assert sd.query(1, 10) == -7
    assert sd.query(5, 10) == 0


def test_empty_range_gives_infinity(values):
    sd = SqrtDecomposition(len(values), values)
    assert sd.query(5, 4) == INF


def test_out_of_range_positions_raise(values):
    sd = SqrtDecomposition(len(values), values)
    with pytest.raises(IndexError):
        sd.update(0, 1)
    with pytest.raises(IndexError):
        sd.query(1, len(values) + 1)
    with pytest.raises(IndexError):
        sd.update_fast(len(values) + 1, 3)


def test_too_few_values_raise():
    with pytest.raises(ValueError):
        SqrtDecomposition(5, [1, 2, 3])
    with pytest.raises(ValueError):
        SqrtDecomposition(-1)