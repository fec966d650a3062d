"""Lowest common ancestor and path weights on a weighted tree by binary lifting."""

from __future__ import annotations

from collections import deque


class LCA:
    """Weighted tree on nodes ``0..n``; call :meth:`build` before querying."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.log = max(1, n.bit_length())
        self.adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
        self.depth = [0] * (n + 1)
        self._up: list[list[int]] = []
        self._cost: list[list[int]] = []

    def add_edge(self, u: int, v: int, weight: int) -> None:
        """Add an undirected edge of the given weight."""
        self.adj[u].append((v, weight))
        self.adj[v].append((u, weight))

    def build(self, root: int = 1) -> None:
        """Root the tree at ``root`` and fill the jump tables."""
        size = self.n + 1
        self.depth = [0] * size
        up = [list(range(size)) for _ in range(self.log)]
        cost = [[0] * size for _ in range(self.log)]
        visited = [False] * size
        visited[root] = True
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v, w in self.adj[u]:
                if visited[v]:
                    continue
                visited[v] = True
                self.depth[v] = self.depth[u] + 1
                up[0][v] = u
                cost[0][v] = w
                for bit in range(1, self.log):
                    mid = up[bit - 1][v]
                    up[bit][v] = up[bit - 1][mid]
                    cost[bit][v] = cost[bit - 1][v] + cost[bit - 1][mid]
                queue.append(v)
        self._up = up
        self._cost = cost

    def _require_built(self) -> None:
        if not self._up:
            raise RuntimeError("call build() before querying")

    def kth_ancestor(self, u: int, k: int) -> int:
        """The ancestor ``k`` steps above ``u``."""
        self._require_built()
        if k < 0 or self.depth[u] < k:
            raise ValueError(f"node {u} has no ancestor {k} levels up")
        for bit in range(self.log):
            if k >> bit & 1:
                u = self._up[bit][u]
        return u

    def get_lca(self, u: int, v: int) -> int:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._require_built()
        if self.depth[u] < self.depth[v]:
            u, v = v, u
        u = self.kth_ancestor(u, self.depth[u] - self.depth[v])
        if u == v:
            return u
        for bit in reversed(range(self.log)):
            if self._up[bit][u] != self._up[bit][v]:
                u, v = self._up[bit][u], self._up[bit][v]
        return self._up[0][u]

    def get_cost(self, u: int, distance: int) -> int:
        """Total weight of the ``distance`` edges going up from ``u``."""
        self._require_built()
        if distance < 0 or self.depth[u] < distance:
            raise ValueError(f"node {u} has no ancestor {distance} levels up")
        total = 0
        for bit in range(self.log):
            if distance >> bit & 1:
                total += self._cost[bit][u]
                u = self._up[bit][u]
        return total

    def query(self, u: int, v: int) -> int:
        """Total weight of the tree path between ``u`` and ``v``."""
        lca = self.get_lca(u, v)
        return self.get_cost(u, self.depth[u] - self.depth[lca]) + self.get_cost(
            v, self.depth[v] - self.depth[lca]
        )