import random

from contestkit.coordinate_compression import CoordinateCompressor


def _values(seed):
    rng = random.Random(seed)
    return [rng.randint(-1000, 1000) for _ in range(40)]


def test_ranks_are_dense_and_one_based():
    values = _values(1)
    compressor = CoordinateCompressor(values)
    ranks = compressor.compress(values)
    assert sorted(set(ranks)) == list(range(1, len(set(values)) + 1))


def test_compression_preserves_order():
    values = _values(2)
    ranks = CoordinateCompressor(values).compress(values)
    for a, ra in zip(values, ranks):
        for b, rb in zip(values, ranks):
            assert (a < b) == (ra < rb)
            assert (a == b) == (ra == rb)


def test_mapping_inverts_compression():
    values = _values(3)
    compressor = CoordinateCompressor(values)
    table = compressor.mapping(values)
    assert table[0] is None
    assert [table[rank] for rank in compressor.compress(values)] == values


def test_add_then_build():
    compressor = CoordinateCompressor()
    for value in ["pear", "apple", "pear", "fig"]:
        compressor.add(value)
    compressor.build()
    assert compressor.compressed == sorted({"pear", "apple", "fig"})
    assert compressor.get("apple") == 1


def test_value_below_everything_gets_zero():
    compressor = CoordinateCompressor([5, 10])
    assert compressor.get(1) == 0
    assert compressor.get(7) == compressor.get(5)