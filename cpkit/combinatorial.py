"""Subset, permutation and bitmask techniques."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterator, Sequence
from functools import reduce
from itertools import combinations
from math import gcd, isqrt, prod
from operator import or_
from typing import Any

__all__ = [
    "max_subset_sum_mod",
    "cheapest_cover",
    "next_permutation",
    "permutations_in_order",
    "xor_sum_of_subsets",
    "coprime_shift_count",
    "first_player_wins",
    "min_elevator_rides",
]


def _subset_sums_mod(values: Sequence[int], modulus: int) -> set[int]:
    sums = {0}
    for value in values:
        sums |= {(s + value) % modulus for s in sums}
    return sums


def max_subset_sum_mod(values: Sequence[int], modulus: int) -> int:
    """Return the largest ``sum(subset) % modulus`` over all subsets.

    The values are split into two halves whose subset sums are combined
    (meet in the middle).
    """
    if modulus < 1:
        raise ValueError("modulus must be positive")
    items = list(values)
    half = len(items) // 2 + 1
    left = _subset_sums_mod(items[:half], modulus)
    right = sorted(_subset_sums_mod(items[half:], modulus))
    best = 0
    for s in left:
        idx = bisect_right(right, modulus - 1 - s)
        if idx:
            best = max(best, s + right[idx - 1])
    return best


def cheapest_cover(
    costs: Sequence[int], distances: Sequence[Sequence[int]], limit: int
) -> list[int]:
    """Choose the cheapest set of nodes so every node lies within ``limit`` of one.

    ``distances`` is a square matrix of direct distances; shortest paths are
    found first. Returns the chosen node indices in ascending order. Among
    selections of equal cost the first one found wins, exploring each node
    as taken before not taken.
    """
    n = len(costs)
    if len(distances) != n or any(len(row) != n for row in distances):
        raise ValueError("distances must be an n by n matrix matching costs")
    dist = [list(row) for row in distances]
    for k in range(n):
        through = dist[k]
        for row in dist:
            via = row[k]
            for j, d in enumerate(through):
                if via + d < row[j]:
                    row[j] = via + d
    reach = [sum(1 << j for j, d in enumerate(row) if d <= limit) for row in dist]
    target = (1 << n) - 1
    best_cost: int | None = None
    best_mask = 0

    def search(pos: int, chosen: int, covered: int, cost: int) -> None:
        nonlocal best_cost, best_mask
        if covered == target:
            if best_cost is None or cost < best_cost:
                best_cost, best_mask = cost, chosen
            return
        if pos == n:
            return
        search(pos + 1, chosen | (1 << pos), covered | reach[pos], cost + costs[pos])
        search(pos + 1, chosen, covered, cost)

    search(0, 0, 0, 0)
    if best_cost is None:
        raise ValueError("no selection of nodes covers every node")
    return [i for i in range(n) if best_mask >> i & 1]


def next_permutation(items: Sequence[Any]) -> list[Any] | None:
    """Return the next permutation of ``items`` in lexicographic order.

    Returns None when ``items`` is already the last permutation.
    """
    a = list(items)
    i = len(a) - 2
    while i >= 0 and a[i] >= a[i + 1]:
        i -= 1
    if i < 0:
        return None
    j = len(a) - 1
    while a[j] <= a[i]:
        j -= 1
    a[i], a[j] = a[j], a[i]
    a[i + 1 :] = reversed(a[i + 1 :])
    return a


def permutations_in_order(n: int) -> Iterator[list[int]]:
    """Yield every permutation of ``1..n`` in lexicographic order."""
    if n < 0:
        raise ValueError("n must be non-negative")

    def generate() -> Iterator[list[int]]:
        current: list[int] | None = list(range(1, n + 1))
        while current is not None:
            yield current
            current = next_permutation(current)

    return generate()


def xor_sum_of_subsets(values: Sequence[int]) -> int:
    """Return the sum of the XOR of every subset of ``values``.

    Each set bit of the OR of all values appears in exactly half of the
    subsets, so the answer is ``OR * 2**(n-1)``.
    """
    items = list(values)
    if not items:
        return 0
    return reduce(or_, items) << (len(items) - 1)


def _distinct_prime_factors(n: int) -> list[int]:
    primes = []
    for p in range(2, isqrt(n) + 1):
        if n % p == 0:
            primes.append(p)
            while n % p == 0:
                n //= p
    if n > 1:
        primes.append(n)
    return primes


def coprime_shift_count(a: int, m: int) -> int:
    """Count ``x`` in ``[0, m)`` with ``gcd(a, m) == gcd(a + x, m)``.

    Uses inclusion-exclusion over the prime factors of ``m / gcd(a, m)``.
    """
    if a < 1 or m < 1:
        raise ValueError("a and m must be positive")
    g = gcd(a, m)
    a //= g
    m //= g
    primes = _distinct_prime_factors(m)
    low, high = a - 1, a + m - 1
    multiples = 0
    for size in range(1, len(primes) + 1):
        for combo in combinations(primes, size):
            step = prod(combo)
            count = high // step - low // step
            multiples += count if size % 2 else -count
    return m - multiples


def first_player_wins(marbles: int) -> bool:
    """Whether the player to move wins when each move takes 2, 3 or 5 marbles.

    A player who cannot move loses.
    """
    if marbles < 0:
        raise ValueError("marbles must be non-negative")
    wins: list[bool] = []
    for count in range(marbles + 1):
        wins.append(any(count >= take and not wins[count - take] for take in (2, 3, 5)))
    return wins[marbles]


def min_elevator_rides(weights: Sequence[int], capacity: int) -> int:
    """Return the fewest rides that carry everyone, each ride holding ``capacity``."""
    items = list(weights)
    if any(w > capacity for w in items):
        raise ValueError("a single weight exceeds the capacity")
    if not items:
        return 0
    best: list[tuple[int, int]] = [(1, 0)]
    for mask in range(1, 1 << len(items)):
        candidate: tuple[int, int] | None = None
        for i, weight in enumerate(items):
            if not mask >> i & 1:
                continue
            rides, load = best[mask ^ (1 << i)]
            option = (rides, load + weight) if load + weight <= capacity else (rides + 1, weight)
            if candidate is None or option < candidate:
                candidate = option
        assert candidate is not None
        best.append(candidate)
    return best[-1][0]