"""Range techniques: divide and conquer, 2D prefix sums, scanlines, ternary search."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from itertools import accumulate

__all__ = [
    "min_paint_strokes",
    "StarSky",
    "min_palindrome_sum_changes",
    "capped_interval_cost",
    "ternary_search_max",
]


def min_paint_strokes(heights: Sequence[int]) -> int:
    """Return the fewest strokes, horizontal or vertical, to paint a fence.

    Plank ``i`` has height ``heights[i]``; a vertical stroke paints one whole
    plank and a horizontal stroke paints one row across adjacent planks.
    """
    h = list(heights)
    results: list[int] = []
    tasks: list[tuple] = [("enter", 0, len(h) - 1, 0)]
    while tasks:
        task = tasks.pop()
        if task[0] == "enter":
            _, lo, hi, base = task
            if hi < lo:
                results.append(0)
                continue
            low_index = min(range(lo, hi + 1), key=h.__getitem__)
            level = h[low_index]
            tasks.append(("exit", lo, hi, level - base))
            tasks.append(("enter", low_index + 1, hi, level))
            tasks.append(("enter", lo, low_index - 1, level))
        else:
            _, lo, hi, horizontal = task
            right = results.pop()
            left = results.pop()
            results.append(min(horizontal + left + right, hi - lo + 1))
    return results[0]


class StarSky:
    """Stars on a grid whose brightness cycles through ``0..max_brightness``.

    A star of initial brightness ``s`` shines with ``(s + t) % (max_brightness + 1)``
    at time ``t``. Coordinates start at 1.
    """

    def __init__(self, stars: Iterable[tuple[int, int, int]], max_brightness: int) -> None:
        if max_brightness < 0:
            raise ValueError("max_brightness must be non-negative")
        star_list = list(stars)
        for x, y, s in star_list:
            if x < 1 or y < 1:
                raise ValueError("coordinates start at 1")
            if not 0 <= s <= max_brightness:
                raise ValueError(f"brightness {s} is outside [0, {max_brightness}]")
        self.max_brightness = max_brightness
        self._width = max((x for x, _, _ in star_list), default=0)
        self._height = max((y for _, y, _ in star_list), default=0)
        grids = [
            [[0] * (self._height + 1) for _ in range(self._width + 1)]
            for _ in range(max_brightness + 1)
        ]
        for x, y, s in star_list:
            grids[s][x][y] += 1
        self._prefix = []
        for grid in grids:
            rows = [list(accumulate(row)) for row in grid]
            self._prefix.append(
                list(accumulate(rows, lambda above, row: [a + b for a, b in zip(above, row)]))
            )

    def brightness(self, time: int, x1: int, y1: int, x2: int, y2: int) -> int:
        """Return the total brightness at ``time`` of the stars in the rectangle."""
        if time < 0:
            raise ValueError("time must be non-negative")
        if x1 < 1 or y1 < 1 or x1 > x2 or y1 > y2:
            raise ValueError("invalid rectangle")
        x2 = min(x2, self._width)
        y2 = min(y2, self._height)
        if x1 > x2 or y1 > y2:
            return 0
        period = self.max_brightness + 1
        total = 0
        for s, g in enumerate(self._prefix):
            count = g[x2][y2] - g[x1 - 1][y2] - g[x2][y1 - 1] + g[x1 - 1][y1 - 1]
            total += (time + s) % period * count
        return total


def min_palindrome_sum_changes(values: Sequence[int], k: int) -> int:
    """Fewest replacements so ``values[i] + values[n-1-i]`` is the same for all i.

    Every value lies in ``[1, k]`` before and after a replacement; ``n`` is even.
    """
    n = len(values)
    if n % 2:
        raise ValueError("the number of values must be even")
    if k < 1:
        raise ValueError("k must be positive")
    if any(not 1 <= v <= k for v in values):
        raise ValueError(f"values must lie in [1, {k}]")
    half = n // 2
    exact = [0] * (2 * k + 2)
    diff = [0] * (2 * k + 3)
    for a, b in zip(values[:half], reversed(values[half:])):
        exact[a + b] += 1
        diff[min(a, b) + 1] += 1
        diff[max(a, b) + k + 1] -= 1
    one_change = list(accumulate(diff))
    best = half
    for target in range(2, 2 * k + 1):
        single = one_change[target] - exact[target]
        double = half - one_change[target]
        best = min(best, single + 2 * double)
    return best


def capped_interval_cost(intervals: Iterable[tuple[int, int, int]], cap: int) -> int:
    """Total daily cost, where each day pays ``min(cap, sum of active costs)``.

    Each interval ``(start, end, cost)`` charges ``cost`` on every day from
    ``start`` to ``end`` inclusive.
    """
    events: defaultdict[int, int] = defaultdict(int)
    for start, end, cost in intervals:
        if end < start:
            raise ValueError(f"interval ({start}, {end}) ends before it starts")
        events[start] += cost
        events[end + 1] -= cost
    points = sorted(events)
    total = 0
    running = 0
    for prev, cur in zip(points, points[1:]):
        running += events[prev]
        total += (cur - prev) * min(cap, running)
    return total


def ternary_search_max(func: Callable[[int], float], low: int, high: int) -> float:
    """Return the largest value of a unimodal ``func`` over integers in ``[low, high]``."""
    if low > high:
        raise ValueError("low must not exceed high")
    best: float | None = None
    lo, hi = low, high
    while lo + 2 < hi:
        m1 = lo + (hi - lo) // 3
        m2 = hi - (hi - lo) // 3
        f1, f2 = func(m1), func(m2)
        if f1 < f2:
            best = f2 if best is None else max(best, f2)
            lo = m1 + 1
        else:
            best = f1 if best is None else max(best, f1)
            hi = m2 - 1
    tail = max(func(i) for i in range(lo, hi + 1))
    return tail if best is None else max(best, tail)