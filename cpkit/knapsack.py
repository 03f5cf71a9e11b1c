"""0/1 knapsack in several forms, and closest subset sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cache
from math import inf

__all__ = [
    "knapsack",
    "knapsack_recursive",
    "knapsack_items",
    "knapsack_large_capacity",
    "subset_sum_closest",
]


def _validate(items: Iterable[tuple[int, int]], capacity: int) -> list[tuple[int, int]]:
    if capacity < 0:
        raise ValueError("capacity must be non-negative")
    pairs = [(weight, profit) for weight, profit in items]
    if any(weight < 0 or profit < 0 for weight, profit in pairs):
        raise ValueError("weights and profits must be non-negative")
    return pairs


def knapsack(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Return the best total profit of ``(weight, profit)`` items within ``capacity``.

    Each item is taken at most once.
    """
    pairs = _validate(items, capacity)
    best = [0] * (capacity + 1)
    for weight, profit in pairs:
        for j in range(capacity, weight - 1, -1):
            candidate = best[j - weight] + profit
            if candidate > best[j]:
                best[j] = candidate
    return best[capacity]


def knapsack_recursive(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Same as :func:`knapsack`, by memoised take-or-skip recursion."""
    pairs = _validate(items, capacity)

    @cache
    def take(pos: int, used: int) -> int:
        if pos == len(pairs):
            return 0
        weight, profit = pairs[pos]
        skip = take(pos + 1, used)
        if used + weight <= capacity:
            return max(skip, profit + take(pos + 1, used + weight))
        return skip

    return take(0, 0)


def knapsack_items(
    items: Iterable[tuple[int, int]], capacity: int
) -> tuple[int, list[int]]:
    """Return the best profit and the indices of one optimal choice, ascending."""
    pairs = _validate(items, capacity)
    table = [[0] * (capacity + 1)]
    for weight, profit in pairs:
        prev = table[-1]
        table.append(
            [
                max(prev[j], prev[j - weight] + profit) if weight <= j else prev[j]
                for j in range(capacity + 1)
            ]
        )
    chosen = []
    j = capacity
    for i in range(len(pairs), 0, -1):
        if table[i][j] != table[i - 1][j]:
            chosen.append(i - 1)
            j -= pairs[i - 1][0]
    chosen.reverse()
    return table[-1][capacity], chosen


def knapsack_large_capacity(items: Iterable[tuple[int, int]], capacity: int) -> int:
    """Same as :func:`knapsack`, indexed by profit so ``capacity`` may be huge.

    Runs in time proportional to the number of items times the total profit.
    """
    pairs = _validate(items, capacity)
    total = sum(profit for _, profit in pairs)
    lightest: list[float] = [0] + [inf] * total
    for weight, profit in pairs:
        for j in range(total, profit - 1, -1):
            candidate = lightest[j - profit] + weight
            if candidate < lightest[j]:
                lightest[j] = candidate
    return max(j for j, weight in enumerate(lightest) if weight <= capacity)


def subset_sum_closest(values: Sequence[int], target: int) -> int:
    """Return the largest subset sum of ``values`` that does not exceed ``target``."""
    return knapsack([(v, v) for v in values], target)