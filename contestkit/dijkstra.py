"""Single-source shortest paths with non-negative weights."""

from __future__ import annotations

import heapq
import math
from typing import Iterable


class Dijkstra:
    """Weighted graph on nodes ``0..n`` built from ``(u, v, weight)`` edges."""

    def __init__(
        self,
        n: int,
        edges: Iterable[tuple[int, int, int]],
        undirected: bool = True,
    ) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        for u, v, w in edges:
            self.adj[u].append((v, w))
            if undirected:
                self.adj[v].append((u, w))

    def distances(self, source: int) -> list[float]:
        """Shortest distance from ``source`` to every node; ``math.inf`` if unreachable."""
        dist: list[float] = [math.inf] * len(self.adj)
        dist[source] = 0
        heap = [(0, source)]
        while heap:
            d, u = heapq.heappop(heap)
            if d > dist[u]:
                continue
            for v, w in self.adj[u]:
                candidate = d + w
                if candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(heap, (candidate, v))
        return dist

    def min_cost(self, source: int, target: int) -> int | None:
        """Shortest distance between two nodes, or ``None`` if unreachable."""
        d = self.distances(source)[target]
        return None if d == math.inf else d