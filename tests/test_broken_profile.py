import pytest

from cpkit.broken_profile import min_light_toggles


def test_already_lit():
    assert min_light_toggles(["*"]) == 0
    assert min_light_toggles(["***", "***"]) == 0


def test_single_dark_cell():
    assert min_light_toggles(["."]) == 1


def test_two_by_two_dark():
    assert min_light_toggles(["..", ".."]) == 1


GRIDS = [
    ["*..", ".*.", "..*"],
    ["*.*.", "....", ".**."],
    [".*", "*.", "..", "*."],
    ["..*..", "*...*"],
]


def _transpose(grid):
    return ["".join(row[j] for row in grid) for j in range(len(grid[0]))]


@pytest.mark.parametrize("grid", GRIDS)
def test_transpose_invariant(grid):
    assert min_light_toggles(grid) == min_light_toggles(_transpose(grid))


@pytest.mark.parametrize("grid", GRIDS)
def test_mirror_invariant(grid):
    assert min_light_toggles(grid) == min_light_toggles([row[::-1] for row in grid])
    assert min_light_toggles(grid) == min_light_toggles(grid[::-1])


@pytest.mark.parametrize("grid", GRIDS)
def test_result_bounded_by_cells(grid):
    result = min_light_toggles(grid)
    assert result is None or 0 <= result <= len(grid) * len(grid[0])


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        min_light_toggles([])


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        min_light_toggles(["**", "*"])