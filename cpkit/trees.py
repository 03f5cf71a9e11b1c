"""Rooted tree queries: lowest common ancestor by binary lifting, Euler tour."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["LowestCommonAncestor", "euler_tour"]


def _tree_adjacency(n: int, edges: Iterable[tuple[int, int]], root: int) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    if not 1 <= root <= n:
        raise ValueError(f"root {root} is outside [1, {n}]")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside [1, {n}]")
        adj[u].append(v)
        adj[v].append(u)
        count += 1
    if count != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {count}")
    return adj


class LowestCommonAncestor:
    """Answers lowest-common-ancestor queries on a rooted tree of nodes ``1..n``."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> None:
        adj = _tree_adjacency(n, edges, root)
        self.n = n
        self.root = root
        parent = [0] * (n + 1)
        self._depth = [0] * (n + 1)
        parent[root] = root
        seen = [False] * (n + 1)
        seen[root] = True
        order = [root]
        for node in order:
            for nb in adj[node]:
                if not seen[nb]:
                    seen[nb] = True
                    parent[nb] = node
                    self._depth[nb] = self._depth[node] + 1
                    order.append(nb)
        if len(order) != n:
            raise ValueError("edges do not connect every node")
        self._up = [parent]
        for _ in range(max(1, n.bit_length())):
            prev = self._up[-1]
            self._up.append([prev[prev[v]] for v in range(n + 1)])

    def query(self, a: int, b: int) -> int:
        """Return the deepest node that is an ancestor of both ``a`` and ``b``."""
        for node in (a, b):
            if not 1 <= node <= self.n:
                raise ValueError(f"node {node} is outside [1, {self.n}]")
        if self._depth[a] > self._depth[b]:
            a, b = b, a
        diff = self._depth[b] - self._depth[a]
        for k, table in enumerate(self._up):
            if diff >> k & 1:
                b = table[b]
        if a == b:
            return a
        for table in reversed(self._up):
            if table[a] != table[b]:
                a, b = table[a], table[b]
        return self._up[0][a]


def euler_tour(n: int, edges: Iterable[tuple[int, int]], root: int = 1) -> list[int]:
    """Return the nodes in order of entry and exit of a depth-first walk.

    Every node appears twice; the span between its two appearances holds its
    subtree, so a subtree has ``(out - in + 1) // 2`` nodes.
    """
    adj = _tree_adjacency(n, edges, root)
    tour = [root]
    visited = {root}
    stack = [(root, iter(adj[root]))]
    while stack:
        node, it = stack[-1]
        for nb in it:
            if nb not in visited:
                visited.add(nb)
                tour.append(nb)
                stack.append((nb, iter(adj[nb])))
                break
        else:
            stack.pop()
            tour.append(node)
    if len(visited) != n:
        raise ValueError("edges do not connect every node")
    return tour