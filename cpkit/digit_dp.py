"""Digit dynamic programming over the decimal digits of a bound."""

from __future__ import annotations

from collections import Counter
from functools import cache

__all__ = ["count_divisible_digit_sum", "count_distinct_equals_max"]


def _count_up_to(n: int, k: int) -> int:
    """Count ``x`` in ``[0, n]`` with ``x % k == 0`` and digit sum divisible by ``k``."""
    if n < 0:
        return 0
    tight = (0, 0)
    loose: Counter[tuple[int, int]] = Counter()
    for d in map(int, str(n)):
        nxt: Counter[tuple[int, int]] = Counter()
        for (num, total), ways in loose.items():
            for digit in range(10):
                nxt[(num * 10 + digit) % k, (total + digit) % k] += ways
        num, total = tight
        for digit in range(d):
            nxt[(num * 10 + digit) % k, (total + digit) % k] += 1
        tight = ((num * 10 + d) % k, (total + d) % k)
        loose = nxt
    return loose[0, 0] + (tight == (0, 0))


def count_divisible_digit_sum(low: int, high: int, k: int) -> int:
    """Count integers in ``[low, high]`` divisible by ``k`` whose digit sum is too."""
    if k < 1:
        raise ValueError("k must be positive")
    if low < 0 or high < low:
        raise ValueError("need 0 <= low <= high")
    if k > 9 * len(str(high)):
        # No positive number in range has a digit sum that large; only zero is left.
        return int(low == 0)
    return _count_up_to(high, k) - _count_up_to(low - 1, k)


def count_distinct_equals_max(limit: int) -> int:
    """Count ``x`` in ``[1, limit]`` whose number of distinct digits equals its largest digit."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    digits = [int(c) for c in str(limit)]
    n = len(digits)

    @cache
    def count(pos: int, tight: bool, started: bool, top: int, mask: int) -> int:
        if pos == n:
            return int(started and top == mask.bit_count())
        bound = digits[pos] if tight else 9
        total = 0
        first = 0
        if not started:
            total += count(pos + 1, False, False, 0, 0)
            first = 1
        for d in range(first, bound + 1):
            total += count(pos + 1, tight and d == bound, True, max(top, d), mask | 1 << d)
        return total

    return count(0, True, False, 0, 0)