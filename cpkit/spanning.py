"""Minimum spanning tree by Kruskal's method."""

from __future__ import annotations

from collections.abc import Iterable

from cpkit.disjoint_set import DisjointSet

__all__ = ["kruskal"]


def kruskal(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[int, list[tuple[int, int, int]]]:
    """Return the total weight and the edges of a minimum spanning tree.

    Nodes are ``1..n`` and each edge is ``(u, v, weight)``. For a graph that
    is not connected the result is a minimum spanning forest.
    """
    edge_list = list(edges)
    for u, v, _ in edge_list:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside [1, {n}]")
    dsu = DisjointSet()
    total = 0
    chosen: list[tuple[int, int, int]] = []
    for u, v, w in sorted(edge_list, key=lambda e: e[2]):
        if len(chosen) == n - 1:
            break
        if dsu.union(u, v):
            total += w
            chosen.append((u, v, w))
    return total, chosen