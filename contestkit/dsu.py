"""Disjoint set union with path compression and union by size."""

from __future__ import annotations


class DSU:
    """Disjoint sets over the nodes ``0..max_nodes``, each starting alone."""

    def __init__(self, max_nodes: int) -> None:
        if max_nodes < 0:
            raise ValueError("max_nodes must be non-negative")
        self._parent = list(range(max_nodes + 1))
        self._size = [1] * (max_nodes + 1)

    def find(self, node: int) -> int:
        """Leader of the set holding ``node``."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def same(self, u: int, v: int) -> bool:
        """Whether ``u`` and ``v`` are in the same set."""
        return self.find(u) == self.find(v)

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return whether they were apart."""
        leader_u, leader_v = self.find(u), self.find(v)
        if leader_u == leader_v:
            return False
        if self._size[leader_u] < self._size[leader_v]:
            leader_u, leader_v = leader_v, leader_u
        self._size[leader_u] += self._size[leader_v]
        self._parent[leader_v] = leader_u
        return True

    def size(self, node: int) -> int:
        """Number of nodes in the set holding ``node``."""
        return self._size[self.find(node)]