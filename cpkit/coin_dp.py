"""Coin change counts and maximum subarray sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = ["coin_change_ways", "coin_change_min", "max_subarray_sum"]


def _validate(coins: Iterable[int], total: int) -> list[int]:
    if total < 0:
        raise ValueError("total must be non-negative")
    values = list(coins)
    if any(c <= 0 for c in values):
        raise ValueError("coins must be positive")
    return values


def coin_change_ways(coins: Iterable[int], total: int) -> int:
    """Count the ways to make ``total`` from unlimited coins, order ignored."""
    values = _validate(coins, total)
    ways = [1] + [0] * total
    for coin in values:
        for j in range(coin, total + 1):
            ways[j] += ways[j - coin]
    return ways[total]


def coin_change_min(coins: Iterable[int], total: int) -> int | None:
    """Return the fewest coins summing to ``total``, or None when impossible."""
    values = _validate(coins, total)
    best: list[int | None] = [0] + [None] * total
    for coin in values:
        for j in range(coin, total + 1):
            prev = best[j - coin]
            if prev is not None and (best[j] is None or prev + 1 < best[j]):
                best[j] = prev + 1
    return best[total]


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous run; the empty run counts as 0."""
    best = running = 0
    for value in values:
        running = max(0, running + value)
        best = max(best, running)
    return best