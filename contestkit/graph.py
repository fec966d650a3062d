"""Unweighted graph with traversal, cycle, bipartite and leaf-peeling helpers."""

from __future__ import annotations

from collections import deque


class Graph:
    """Graph on nodes ``1..n`` (node 0 exists but is usually unused)."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self.n = n
        self.adj: list[list[int]] = [[] for _ in range(n + 1)]
        self.parent: list[int] = [-1] * (n + 1)
        self.depth: list[int] = [0] * (n + 1)

    def add_edge(self, u: int, v: int, directed: bool = False) -> None:
        """Add an edge from ``u`` to ``v``; both ways unless ``directed``."""
        self.adj[u].append(v)
        if not directed:
            self.adj[v].append(u)

    def remove_edge(self, u: int, v: int) -> None:
        """Remove one undirected edge between ``u`` and ``v``."""
        if v not in self.adj[u] or u not in self.adj[v]:
            raise ValueError(f"no edge between {u} and {v}")
        self.adj[u].remove(v)
        self.adj[v].remove(u)

    def dfs(self, node: int) -> list[int]:
        """Depth-first search from ``node``; return nodes in visiting order.

        Fills :attr:`parent` (``-1`` for the start) and :attr:`depth`.
        """
        visited = [False] * (self.n + 1)
        self.parent = [-1] * (self.n + 1)
        self.depth = [0] * (self.n + 1)
        visited[node] = True
        order = [node]
        stack = [(node, iter(self.adj[node]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    self.parent[v] = u
                    self.depth[v] = self.depth[u] + 1
                    order.append(v)
                    stack.append((v, iter(self.adj[v])))
                    break
            else:
                stack.pop()
        return order

    def has_cycle(self, node: int, parent: int = -1) -> bool:
        """Whether an undirected cycle is reachable from ``node``."""
        visited = [False] * (self.n + 1)
        visited[node] = True
        stack = [(node, parent, iter(self.adj[node]))]
        while stack:
            u, p, neighbours = stack[-1]
            for v in neighbours:
                if not visited[v]:
                    visited[v] = True
                    stack.append((v, u, iter(self.adj[v])))
                    break
                if v != p:
                    return True
            else:
                stack.pop()
        return False

    def path(self, node: int) -> list[int]:
        """Nodes from ``node`` up to the start of the last search, via :attr:`parent`."""
        result = [node]
        while self.parent[result[-1]] != -1:
            result.append(self.parent[result[-1]])
        return result

    def topology(self) -> list[int]:
        """Peel leaves (degree 1) repeatedly; return nodes in reverse peeling order."""
        degree = [len(neighbours) for neighbours in self.adj]
        queue: deque[int] = deque()
        for node in range(1, self.n + 1):
            if degree[node] == 1:
                queue.append(node)
                degree[node] -= 1
        order = []
        while queue:
            u = queue.popleft()
            order.append(u)
            for v in self.adj[u]:
                degree[v] -= 1
                if degree[v] == 1:
                    queue.append(v)
        order.reverse()
        return order

    def bfs(self, source: int, target: int) -> int | None:
        """Number of edges on a shortest path, or ``None`` if ``target`` is unreachable.

        Fills :attr:`parent` with the breadth-first tree.
        """
        if source == target:
            return 0
        self.parent = [-1] * (self.n + 1)
        dist: list[int | None] = [None] * (self.n + 1)
        dist[source] = 0
        queue = deque([source])
        while queue:
            u = queue.popleft()
            for v in self.adj[u]:
                if dist[v] is None:
                    dist[v] = dist[u] + 1
                    self.parent[v] = u
                    queue.append(v)
        return dist[target]

    def is_bipartite(self) -> bool:
        """Whether the nodes ``1..n`` can be two-coloured along every edge."""
        colour = [0] * (self.n + 1)
        for start in range(1, self.n + 1):
            if colour[start]:
                continue
            colour[start] = -1
            queue = deque([start])
            while queue:
                u = queue.popleft()
                for v in self.adj[u]:
                    if colour[v] == colour[u]:
                        return False
                    if colour[v] == 0:
                        colour[v] = -colour[u]
                        queue.append(v)
        return True