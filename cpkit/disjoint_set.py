"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

from collections.abc import Hashable, Sequence

__all__ = ["DisjointSet", "best_minimum_by_length"]


class DisjointSet:
    """A union-find structure over arbitrary hashable elements.

    Elements are created on first use, each in a set of its own.
    """

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}

    def _ensure(self, node: Hashable) -> None:
        if node not in self._parent:
            self._parent[node] = node
            self._size[node] = 1

    def find(self, node: Hashable) -> Hashable:
        """Return the representative of the set holding ``node``."""
        self._ensure(node)
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of ``a`` and ``b``.

        Returns False when they were already in the same set, True otherwise.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._size[ra] < self._size[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        self._size[ra] += self._size[rb]
        return True

    def size_of(self, node: Hashable) -> int:
        """Return the number of elements in the set holding ``node``."""
        return self._size[self.find(node)]


def best_minimum_by_length(values: Sequence[int]) -> list[int]:
    """For every length k, the largest minimum over subarrays of that length.

    Entry ``k - 1`` of the result belongs to length ``k``.
    """
    n = len(values)
    answers = [0] * n
    active = [False] * n
    dsu = DisjointSet()
    filled = 0
    for value, pos in sorted(((v, i) for i, v in enumerate(values)), reverse=True):
        active[pos] = True
        size = 1
        if pos > 0 and active[pos - 1]:
            dsu.union(pos, pos - 1)
            size = dsu.size_of(pos)
        if pos < n - 1 and active[pos + 1]:
            dsu.union(pos, pos + 1)
            size = dsu.size_of(pos)
        while filled < size:
            answers[filled] = value
            filled += 1
    return answers