"""Monotonic deque techniques and Mo's algorithm for offline range queries."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Sequence
from math import isqrt

__all__ = ["min_of_window_maxima", "next_greater", "count_pairs_in_ranges"]


def min_of_window_maxima(values: Sequence[int], width: int) -> int:
    """Return the smallest of the maxima over all windows of ``width`` elements."""
    if not 1 <= width <= len(values):
        raise ValueError(f"width must lie in [1, {len(values)}]")
    window: deque[int] = deque()
    best: int | None = None
    for i, value in enumerate(values):
        if window and window[0] <= i - width:
            window.popleft()
        while window and values[window[-1]] < value:
            window.pop()
        window.append(i)
        if i >= width - 1:
            top = values[window[0]]
            best = top if best is None else min(best, top)
    assert best is not None
    return best


def next_greater(values: Sequence[int]) -> list[int | None]:
    """For each element, the first later element strictly greater, or None."""
    result: list[int | None] = [None] * len(values)
    stack: list[int] = []
    for i, value in enumerate(values):
        while stack and values[stack[-1]] < value:
            result[stack.pop()] = value
        stack.append(i)
    return result


def count_pairs_in_ranges(
    values: Sequence[int], queries: Sequence[tuple[int, int]]
) -> list[int]:
    """For each inclusive range, count disjoint pairs of equal values in it.

    That is the sum of ``count // 2`` over the distinct values of the range.
    """
    n = len(values)
    for left, right in queries:
        if not 0 <= left <= right < n:
            raise IndexError(f"range [{left}, {right}] is outside [0, {n - 1}]")
    block = isqrt(n) + 1
    order = sorted(
        range(len(queries)), key=lambda q: (queries[q][0] // block, queries[q][1])
    )
    counts: defaultdict[int, int] = defaultdict(int)
    pairs = 0
    answers = [0] * len(queries)
    cur_left, cur_right = 0, -1

    def add(idx: int) -> None:
        nonlocal pairs
        v = values[idx]
        if counts[v] & 1:
            pairs += 1
        counts[v] += 1

    def remove(idx: int) -> None:
        nonlocal pairs
        v = values[idx]
        counts[v] -= 1
        if counts[v] & 1:
            pairs -= 1

    for qi in order:
        left, right = queries[qi]
        while cur_left > left:
            cur_left -= 1
            add(cur_left)
        while cur_right < right:
            cur_right += 1
            add(cur_right)
        while cur_left < left:
            remove(cur_left)
            cur_left += 1
        while cur_right > right:
            remove(cur_right)
            cur_right -= 1
        answers[qi] = pairs
    return answers