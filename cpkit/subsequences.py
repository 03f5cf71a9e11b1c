"""Longest common subsequence and substring, and increasing subsequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from functools import cache
from typing import Any

__all__ = [
    "lcs_length",
    "lcs_length_recursive",
    "all_lcs",
    "longest_common_substring",
    "longest_consecutive_run",
    "lis",
    "lis_tails",
    "lis_length",
]


def _lcs_table(a: Sequence[Any], b: Sequence[Any]) -> list[list[int]]:
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i, x in enumerate(a):
        row, above = table[i + 1], table[i]
        for j, y in enumerate(b):
            row[j + 1] = above[j] + 1 if x == y else max(row[j], above[j + 1])
    return table


def lcs_length(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    prev = [0] * (len(b) + 1)
    for x in a:
        cur = [0]
        for j, y in enumerate(b):
            cur.append(prev[j] + 1 if x == y else max(cur[j], prev[j + 1]))
        prev = cur
    return prev[-1]


def lcs_length_recursive(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Same as :func:`lcs_length`, by memoised recursion from the ends."""

    @cache
    def solve(i: int, j: int) -> int:
        if i < 0 or j < 0:
            return 0
        if a[i] == b[j]:
            return 1 + solve(i - 1, j - 1)
        return max(solve(i, j - 1), solve(i - 1, j))

    return solve(len(a) - 1, len(b) - 1)


def all_lcs(a: str, b: str) -> list[str]:
    """Return every distinct longest common subsequence of two strings, sorted."""
    table = _lcs_table(a, b)

    @cache
    def collect(x: int, y: int) -> frozenset[str]:
        if x == 0 or y == 0:
            return frozenset({""})
        if a[x - 1] == b[y - 1]:
            return frozenset(s + a[x - 1] for s in collect(x - 1, y - 1))
        found: set[str] = set()
        if table[x][y - 1] >= table[x - 1][y]:
            found |= collect(x, y - 1)
        if table[x - 1][y] >= table[x][y - 1]:
            found |= collect(x - 1, y)
        return frozenset(found)

    return sorted(collect(len(a), len(b)))


def longest_common_substring(a: Sequence[Any], b: Sequence[Any]) -> int:
    """Return the length of the longest contiguous run common to ``a`` and ``b``."""
    best = 0
    prev = [0] * (len(b) + 1)
    for x in a:
        cur = [0] * (len(b) + 1)
        for j, y in enumerate(b):
            if x == y:
                cur[j + 1] = prev[j] + 1
                best = max(best, cur[j + 1])
        prev = cur
    return best


def longest_consecutive_run(values: Sequence[int]) -> tuple[int, list[int]]:
    """Find the longest subsequence whose values are ``x, x+1, x+2, ...``.

    Returns its length and its indices in ascending order.
    """
    n = len(values)
    if n == 0:
        return 0, []
    last: dict[int, int] = {}
    run = [1] * n
    best, end = 0, 0
    for i, value in enumerate(values):
        if value - 1 in last:
            run[i] += run[last[value - 1]]
            if run[i] > best:
                best, end = run[i], i
        last[value] = i
    if best == 0:
        return 1, [0]
    chosen = []
    expected = values[end]
    for i in range(end, -1, -1):
        if values[i] == expected:
            chosen.append(i)
            expected -= 1
    chosen.reverse()
    return best, chosen


def lis(values: Sequence[Any]) -> list[Any]:
    """Return one longest strictly increasing subsequence, in quadratic time."""
    n = len(values)
    if n == 0:
        return []
    length = [1] * n
    best, end = 1, 0
    for i in range(n):
        for j in range(i):
            if values[j] < values[i]:
                length[i] = max(length[i], length[j] + 1)
                if length[i] > best:
                    best, end = length[i], i
    sequence = [values[end]]
    prev = end
    for j in range(end - 1, -1, -1):
        if values[j] < values[prev] and length[j] + 1 == length[prev]:
            sequence.append(values[j])
            prev = j
    sequence.reverse()
    return sequence


def lis_tails(values: Sequence[Any]) -> list[Any]:
    """Return the smallest possible tail of a strictly increasing run of each length."""
    tails: list[Any] = []
    for value in values:
        i = bisect_left(tails, value)
        if i == len(tails):
            tails.append(value)
        else:
            tails[i] = value
    return tails


def lis_length(values: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    return len(lis_tails(values))