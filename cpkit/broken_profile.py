"""Lights puzzle solved with a row-by-row profile DP."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

__all__ = ["min_light_toggles"]


def min_light_toggles(grid: Iterable[str]) -> int | None:
    """Fewest presses to light every cell, or None when impossible.

    ``'*'`` marks a lit cell. Pressing a cell flips it and its up to eight
    neighbours.
    """
    rows = list(grid)
    if not rows:
        raise ValueError("grid must have at least one row")
    width = len(rows[0])
    if width == 0 or any(len(row) != width for row in rows):
        raise ValueError("grid rows must be non-empty and of equal length")
    full = (1 << width) - 1
    lights = [sum(1 << j for j, ch in enumerate(row) if ch == "*") for row in rows]
    lights.append(0)
    spread = [(t ^ (t << 1) ^ (t >> 1)) & full for t in range(1 << width)]
    by_spread: defaultdict[int, list[int]] = defaultdict(list)
    for presses, pattern in enumerate(spread):
        by_spread[pattern].append(presses)

    # State: (current row, previous row) after presses so far -> fewest presses.
    states: dict[tuple[int, int], int] = {(lights[0], 0): 0}
    for pos in range(len(rows)):
        nxt: dict[tuple[int, int], int] = {}
        for (cur, prev), cost in states.items():
            # Past the first row, the previous row can only be fixed now.
            choices = range(1 << width) if pos == 0 else by_spread.get(prev ^ full, ())
            for presses in choices:
                pattern = spread[presses]
                key = (lights[pos + 1] ^ pattern, cur ^ pattern)
                total = cost + presses.bit_count()
                if key not in nxt or total < nxt[key]:
                    nxt[key] = total
        states = nxt
    return min((cost for (_, prev), cost in states.items() if prev == full), default=None)