"""All-pairs shortest paths by the Floyd-Warshall algorithm."""

from __future__ import annotations

import math
from typing import Iterable


class Floyd:
    """Undirected weighted graph on nodes ``1..n``.

    Before :meth:`build` the table holds only direct edges (the lightest of
    parallel edges) and zero from each node to itself.
    """

    def __init__(self, n: int, edges: Iterable[tuple[int, int, int]]) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        dist: list[list[float]] = [[math.inf] * (n + 1) for _ in range(n + 1)]
        for node in range(n + 1):
            dist[node][node] = 0
        for u, v, w in edges:
            best = min(dist[u][v], dist[v][u], w)
            dist[u][v] = dist[v][u] = best
        self._dist = dist

    def build(self) -> None:
        """Relax every pair through every intermediate node."""
        dist = self._dist
        nodes = range(1, self.n + 1)
        for k in nodes:
            through = dist[k]
            for u in nodes:
                row = dist[u]
                to_k = row[k]
                if to_k == math.inf:
                    continue
                for v in nodes:
                    candidate = to_k + through[v]
                    if candidate < row[v]:
                        row[v] = candidate

    def distance(self, u: int, v: int) -> float:
        """Current distance from ``u`` to ``v``; ``math.inf`` if unknown."""
        return self._dist[u][v]