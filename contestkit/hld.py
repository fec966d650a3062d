"""Heavy-light decomposition of a rooted tree into position ranges."""

from __future__ import annotations

from typing import Sequence


class HLD:
    """Heavy-light decomposition of a tree on nodes ``1..n``.

    Positions ``1..n`` follow a depth-first order that visits the heavy
    child first, so every heavy chain occupies a contiguous range.
    """

    def __init__(
        self,
        n: int,
        adjacency: Sequence[Sequence[int]],
        root: int = 1,
        values_on_edges: bool = False,
    ) -> None:
        if n < 1:
            raise ValueError("n must be positive")
        self.n = n
        self.values_on_edges = values_on_edges
        self.adj = [list(neighbours) for neighbours in adjacency]
        size = n + 1
        self.parent = [-1] * size
        self.depth = [0] * size
        self.subtree_size = [0] * size
        self.heavy: list[int | None] = [None] * size
        self.head = [0] * size
        self.pos = [0] * size
        self._decompose_sizes(root)
        self._assign_positions(root)

    def _decompose_sizes(self, root: int) -> None:
        order = [root]
        stack = [root]
        while stack:
            u = stack.pop()
            for v in self.adj[u]:
                if v == self.parent[u]:
                    continue
                self.parent[v] = u
                self.depth[v] = self.depth[u] + 1
                order.append(v)
                stack.append(v)
        for u in reversed(order):
            self.subtree_size[u] += 1
            best = 0
            for v in self.adj[u]:
                if v == self.parent[u]:
                    continue
                if self.subtree_size[v] > best:
                    best = self.subtree_size[v]
                    self.heavy[u] = v
            if self.parent[u] != -1:
                self.subtree_size[self.parent[u]] += self.subtree_size[u]

    def _assign_positions(self, root: int) -> None:
        next_pos = 1
        stack = [(root, True)]
        while stack:
            u, new_chain = stack.pop()
            self.head[u] = u if new_chain else self.head[self.parent[u]]
            self.pos[u] = next_pos
            next_pos += 1
            heavy = self.heavy[u]
            light = [v for v in self.adj[u] if v != self.parent[u] and v != heavy]
            stack.extend((v, True) for v in reversed(light))
            if heavy is not None:
                stack.append((heavy, False))

    def query_path(self, u: int, v: int) -> list[tuple[int, int]]:
        """Inclusive position ranges that together cover the path ``u``..``v``.

        With values on edges, the common ancestor's position is left out.
        """
        head, depth, pos = self.head, self.depth, self.pos
        ranges = []
        while head[u] != head[v]:
            if depth[head[u]] < depth[head[v]]:
                u, v = v, u
            ranges.append((pos[head[u]], pos[u]))
            u = self.parent[head[u]]
        if depth[u] < depth[v]:
            u, v = v, u
        if not self.values_on_edges:
            ranges.append((pos[v], pos[u]))
        elif u != v:
            ranges.append((pos[v] + 1, pos[u]))
        return ranges