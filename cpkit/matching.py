"""Maximum bipartite matching by Kuhn's augmenting paths."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Mapping, Sequence

__all__ = ["max_bipartite_matching", "min_cover_cells"]

# Up, down, right, left.
_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def max_bipartite_matching(
    adjacency: Mapping[Hashable, Iterable[Hashable]], left: Iterable[Hashable]
) -> dict[Hashable, Hashable]:
    """Return a maximum matching as a mapping from left vertex to right vertex.

    ``adjacency`` maps each left vertex to the right vertices it may pair with;
    left vertices are tried in the order given by ``left``.
    """
    owner: dict[Hashable, Hashable] = {}

    def augment(v: Hashable, used: set[Hashable]) -> bool:
        if v in used:
            return False
        used.add(v)
        for to in adjacency.get(v, ()):
            if to not in owner or augment(owner[to], used):
                owner[to] = v
                return True
        return False

    for v in left:
        augment(v, set())
    return {v: to for to, v in owner.items()}


def min_cover_cells(grid: Sequence[str]) -> int:
    """Fewest pieces, each covering one cell or two adjacent cells, to cover every cell.

    Cells marked ``'o'`` need no cover; every other cell does.
    """
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows must be of equal length")
    cells = [
        (i, j) for i, row in enumerate(grid) for j, ch in enumerate(row) if ch != "o"
    ]
    present = set(cells)
    adjacency = {
        (i, j): [(i + di, j + dj) for di, dj in _STEPS if (i + di, j + dj) in present]
        for i, j in cells
    }
    matched = len(max_bipartite_matching(adjacency, cells))
    return len(cells) - matched + matched // 2