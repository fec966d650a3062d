import random

from contestkit.dsu import DSU


def test_initial_sets_are_singletons():
    dsu = DSU(5)
    for node in range(1, 6):
        assert dsu.find(node) == node
        assert dsu.size(node) == 1


def test_union_and_same():
    dsu = DSU(5)
    assert dsu.union(1, 2) is True
    assert dsu.same(1, 2)
    assert not dsu.same(1, 3)
    assert dsu.size(2) == dsu.size(1) == 2
    assert dsu.union(2, 1) is False


def test_chain_of_unions_joins_everything():
    n = 8
    dsu = DSU(n)
    for node in range(1, n):
        dsu.union(node, node + 1)
    leaders = {dsu.find(node) for node in range(1, n + 1)}
    assert len(leaders) == 1
    assert dsu.size(n) == n


def test_random_unions_match_label_merging():
    rng = random.Random(7)
    n = 40
    dsu = DSU(n)
    label = list(range(n + 1))
    for _ in range(60):
        u, v = rng.randint(1, n), rng.randint(1, n)
        merged = dsu.union(u, v)
        assert merged == (label[u] != label[v])
        old, new = label[v], label[u]
        label = [new if x == old else x for x in label]
    for u in range(1, n + 1):
        assert dsu.size(u) == label[1:].count(label[u])
        for v in range(1, n + 1):
            assert dsu.same(u, v) == (label[u] == label[v])