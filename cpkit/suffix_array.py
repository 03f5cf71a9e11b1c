"""Suffix array by prefix doubling and the LCP array by Kasai's method."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["suffix_array", "lcp_array"]


def suffix_array(text: str) -> list[int]:
    """Return the starting positions of the suffixes of ``text`` in sorted order."""
    n = len(text)
    if n == 0:
        return []
    rank = [ord(ch) for ch in text]
    order = list(range(n))
    k = 1
    while True:
        def key(i: int) -> tuple[int, int]:
            return rank[i], rank[i + k] if i + k < n else -1

        order.sort(key=key)
        new_rank = [0] * n
        for prev, cur in zip(order, order[1:]):
            new_rank[cur] = new_rank[prev] + (key(prev) != key(cur))
        rank = new_rank
        if rank[order[-1]] == n - 1 or k >= n:
            return order
        k <<= 1


def lcp_array(text: str, suffixes: Sequence[int]) -> list[int]:
    """Return the longest common prefix of each suffix with the one before it.

    ``suffixes`` is the suffix array of ``text``; the first entry is 0.
    """
    n = len(text)
    if sorted(suffixes) != list(range(n)):
        raise ValueError("suffixes is not a suffix array of text")
    rank = [0] * n
    for i, start in enumerate(suffixes):
        rank[start] = i
    lcp = [0] * n
    h = 0
    for i in range(n):
        if rank[i] == 0:
            h = 0
            continue
        j = suffixes[rank[i] - 1]
        while i + h < n and j + h < n and text[i + h] == text[j + h]:
            h += 1
        lcp[rank[i]] = h
        if h:
            h -= 1
    return lcp