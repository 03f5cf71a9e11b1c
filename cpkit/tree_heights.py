"""Height of a tree seen from every node, by in/out (rerooting) DP."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["tree_heights"]


def tree_heights(n: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the greatest distance from each node to any other node.

    Nodes are numbered ``1..n``; entry ``i`` of the result belongs to node ``i + 1``.
    """
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    count = 0
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside [1, {n}]")
        adjacency[u].append(v)
        adjacency[v].append(u)
        count += 1
    if count != n - 1:
        raise ValueError(f"a tree on {n} nodes has {n - 1} edges, got {count}")

    parent = [0] * (n + 1)
    seen = [False] * (n + 1)
    seen[1] = True
    order = [1]
    for node in order:
        for nb in adjacency[node]:
            if not seen[nb]:
                seen[nb] = True
                parent[nb] = node
                order.append(nb)
    if len(order) != n:
        raise ValueError("edges do not connect every node")

    down = [0] * (n + 1)
    for node in reversed(order):
        p = parent[node]
        if p:
            down[p] = max(down[p], down[node] + 1)

    up = [0] * (n + 1)
    for node in order:
        children = [c for c in adjacency[node] if c != parent[node]]
        first = second = -1
        for child in children:
            h = down[child]
            if h >= first:
                first, second = h, first
            elif h > second:
                second = h
        for child in children:
            other = second if down[child] == first else first
            up[child] = max(up[node] + 1, other + 2)

    return [max(down[i], up[i]) for i in range(1, n + 1)]