"""Dijkstra's and Floyd-Warshall's shortest paths."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from math import inf

__all__ = ["dijkstra", "floyd_warshall", "shortest_subsequence"]


def dijkstra(
    n: int, edges: Iterable[tuple[int, int, float]], source: int
) -> list[float | None]:
    """Shortest distances from ``source`` over undirected weighted edges.

    Nodes are ``1..n``; entry ``i`` belongs to node ``i + 1`` and is None
    when that node cannot be reached.
    """
    if not 1 <= source <= n:
        raise ValueError(f"source {source} is outside [1, {n}]")
    adj: list[list[tuple[int, float]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError(f"edge ({u}, {v}) has a node outside [1, {n}]")
        if w < 0:
            raise ValueError("edge weights must be non-negative")
        adj[u].append((v, w))
        adj[v].append((u, w))
    dist: list[float] = [inf] * (n + 1)
    dist[source] = 0
    heap: list[tuple[float, int]] = [(0, source)]
    while heap:
        d, node = heapq.heappop(heap)
        if d > dist[node]:
            continue
        for nb, w in adj[node]:
            if d + w < dist[nb]:
                dist[nb] = d + w
                heapq.heappush(heap, (dist[nb], nb))
    return [None if d == inf else d for d in dist[1:]]


def floyd_warshall(matrix: Sequence[Sequence[float]]) -> list[list[float]]:
    """All-pairs shortest distances from a square matrix of direct lengths.

    Use ``math.inf`` where there is no arc. The input is left unchanged.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    dist = [list(row) for row in matrix]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            if via == inf:
                continue
            for j, d in enumerate(through):
                if via + d < row[j]:
                    row[j] = via + d
    return dist


def shortest_subsequence(adjacency: Sequence[str], path: Sequence[int]) -> list[int]:
    """Shortest subsequence of ``path`` whose shortest-path walk is ``path`` itself.

    ``adjacency`` holds one string of ``'0'``/``'1'`` per node; nodes are
    numbered from 1. The first and last nodes of ``path`` are always kept.
    """
    n = len(adjacency)
    if any(len(row) != n for row in adjacency):
        raise ValueError("adjacency must be square")
    if len(path) < 2:
        raise ValueError("path must hold at least two nodes")
    for node in path:
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside [1, {n}]")
    for a, b in zip(path, path[1:]):
        if adjacency[a - 1][b - 1] != "1":
            raise ValueError(f"path uses missing arc {a} -> {b}")
    dist = floyd_warshall(
        [[0 if i == j else (1 if ch == "1" else inf) for j, ch in enumerate(row)]
         for i, row in enumerate(adjacency)]
    )
    result = [path[0]]
    walked = 0
    for prev, cur in zip(path, path[1:]):
        walked += dist[prev - 1][cur - 1]
        if walked > dist[result[-1] - 1][cur - 1]:
            result.append(prev)
            walked = dist[prev - 1][cur - 1]
    result.append(path[-1])
    return result