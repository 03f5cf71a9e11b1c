"""Binary indexed tree and problems solved with it."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

__all__ = ["FenwickTree", "distinct_in_ranges", "count_candy_distributions", "CANDY_MOD"]

CANDY_MOD = 1_000_000_007


class FenwickTree:
    """Prefix sums over ``size`` elements, indexed from 0, starting at zero."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._tree = [0] * (size + 1)

    def add(self, index: int, delta: int) -> None:
        """Add ``delta`` to element ``index``."""
        if not 0 <= index < self.size:
            raise IndexError(f"index {index} is outside [0, {self.size - 1}]")
        i = index + 1
        while i <= self.size:
            self._tree[i] += delta
            i += i & -i

    def prefix_sum(self, index: int) -> int:
        """Return the sum of elements 0 through ``index`` inclusive; -1 gives 0."""
        if not -1 <= index < self.size:
            raise IndexError(f"index {index} is outside [-1, {self.size - 1}]")
        total = 0
        i = index + 1
        while i > 0:
            total += self._tree[i]
            i -= i & -i
        return total

    def range_sum(self, left: int, right: int) -> int:
        """Return the sum of elements ``left`` through ``right`` inclusive."""
        if left > right + 1:
            raise IndexError(f"empty range [{left}, {right}]")
        return self.prefix_sum(right) - self.prefix_sum(left - 1)


def distinct_in_ranges(
    values: Sequence[int], queries: Sequence[tuple[int, int]]
) -> list[int]:
    """Count distinct values in each inclusive range ``(left, right)``, offline."""
    n = len(values)
    by_right: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for qi, (left, right) in enumerate(queries):
        if not 0 <= left <= right < n:
            raise IndexError(f"range [{left}, {right}] is outside [0, {n - 1}]")
        by_right[right].append((left, qi))
    answers = [0] * len(queries)
    tree = FenwickTree(n)
    last_seen: dict[int, int] = {}
    for i, value in enumerate(values):
        if value in last_seen:
            tree.add(last_seen[value], -1)
        tree.add(i, 1)
        last_seen[value] = i
        for left, qi in by_right.get(i, ()):
            answers[qi] = tree.range_sum(left, i)
    return answers


def count_candy_distributions(limits: Sequence[int], total: int) -> int:
    """Count ways to hand out ``total`` candies, child ``i`` getting 0..limits[i].

    The count is taken modulo 1e9+7.
    """
    if total < 0:
        raise ValueError("total must be non-negative")
    if not limits:
        return 1 if total == 0 else 0
    tree = FenwickTree(total + 1)
    ways = [0] * (total + 1)
    for j in range(min(total, limits[-1]) + 1):
        tree.add(j, 1)
        ways[j] = 1
    for limit in reversed(limits[:-1]):
        for j in range(total, -1, -1):
            reach = min(limit, j)
            now = tree.range_sum(j - reach, j) % CANDY_MOD
            tree.add(j, now - ways[j])
            ways[j] = now
    return ways[total] % CANDY_MOD