import math
import random

from contestkit.dijkstra import Dijkstra
from contestkit.floyd import Floyd


def test_shorter_path_through_middle():
    graph = Dijkstra(3, [(1, 2, 1), (2, 3, 2), (1, 3, 5)])
    assert graph.min_cost(1, 3) == 3


def test_source_distance_is_zero():
    graph = Dijkstra(3, [(1, 2, 4)])
    assert graph.distances(2)[2] == 0
    assert graph.min_cost(1, 1) == 0


def test_unreachable():
    graph = Dijkstra(4, [(1, 2, 4)])
    assert graph.min_cost(1, 4) is None
    assert graph.distances(1)[4] == math.inf


def test_directed_edges():
    graph = Dijkstra(2, [(1, 2, 6)], undirected=False)
    assert graph.min_cost(1, 2) == 6
    assert graph.min_cost(2, 1) is None


def test_agrees_with_floyd_on_random_graph():
    rng = random.Random(11)
    n = 12
    edges = [
        (rng.randint(1, n), rng.randint(1, n), rng.randint(1, 20)) for _ in range(30)
    ]
    dijkstra = Dijkstra(n, edges)
    floyd = Floyd(n, edges)
    floyd.build()
    for u in range(1, n + 1):
        dist = dijkstra.distances(u)
        for v in range(1, n + 1):
            assert dist[v] == floyd.distance(u, v)