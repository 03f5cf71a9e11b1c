"""Interval dynamic programming: palindromes, matrix chains and talk scheduling."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import cache
from math import inf

__all__ = [
    "longest_palindromic_subsequence",
    "matrix_chain_cost",
    "min_palindrome_cuts",
    "schedule_talks",
]


def longest_palindromic_subsequence(text: Sequence[object]) -> int:
    """Return the length of the longest palindromic subsequence of ``text``."""
    n = len(text)
    if n == 0:
        return 0
    # best[i] holds the answer for text[i:j+1] as j advances.
    best = [0] * n
    for j in range(n):
        best[j] = 1
        diagonal = 0  # answer for text[i+1:j] from the previous column
        for i in range(j - 1, -1, -1):
            previous = best[i]
            if text[i] == text[j]:
                best[i] = diagonal + 2
            else:
                best[i] = max(best[i], best[i + 1])
            diagonal = previous
    return best[0]


def matrix_chain_cost(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications to multiply a chain of matrices.

    Matrix ``i`` has shape ``dims[i] x dims[i+1]``.
    """
    if any(d <= 0 for d in dims):
        raise ValueError("dimensions must be positive")
    count = len(dims) - 1
    if count <= 1:
        return 0
    cost = [[0] * count for _ in range(count)]
    for span in range(1, count):
        for i in range(count - span):
            j = i + span
            cost[i][j] = min(
                cost[i][k] + cost[k + 1][j] + dims[i] * dims[k + 1] * dims[j + 1]
                for k in range(i, j)
            )
    return cost[0][count - 1]


def min_palindrome_cuts(text: Sequence[object]) -> int:
    """Return the fewest cuts splitting ``text`` into palindromes.

    The number of pieces is one more than this.
    """
    n = len(text)
    if n == 0:
        return 0
    palindrome = [[False] * n for _ in range(n)]
    cuts = [0] * n
    for j in range(n):
        best = j
        for i in range(j + 1):
            if text[i] == text[j] and (j - i < 2 or palindrome[i + 1][j - 1]):
                palindrome[i][j] = True
                best = 0 if i == 0 else min(best, cuts[i - 1] + 1)
        cuts[j] = best
    return cuts[-1]


def schedule_talks(talks: Iterable[tuple[float, float, int]]) -> tuple[int, list[int]]:
    """Choose non-overlapping talks, in the given order, with most attendance.

    Each talk is ``(start, end, attendance)``; a talk may start when the
    previous chosen one ends. Returns the total attendance and the chosen
    indices in ascending order. On ties a talk is left out.
    """
    items = [(start, end, attendance) for start, end, attendance in talks]
    for start, end, attendance in items:
        if end < start:
            raise ValueError(f"talk ({start}, {end}) ends before it starts")
        if attendance < 0:
            raise ValueError("attendance must be non-negative")
    n = len(items)

    @cache
    def best(pos: int, free_from: float) -> int:
        if pos == n:
            return 0
        start, end, attendance = items[pos]
        skip = best(pos + 1, free_from)
        if start >= free_from:
            return max(skip, attendance + best(pos + 1, end))
        return skip

    total = best(0, -inf)
    chosen = []
    remaining = total
    free_from: float = -inf
    for pos, (_, end, attendance) in enumerate(items):
        if best(pos + 1, free_from) == remaining:
            continue
        chosen.append(pos)
        remaining -= attendance
        free_from = end
    return total, chosen