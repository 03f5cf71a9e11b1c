import pytest

from cpkit.matching import max_bipartite_matching, min_cover_cells


def test_matching_pairs_are_valid_and_distinct():
    adjacency = {"a": ["x", "y"], "b": ["x"], "c": ["y", "z"]}
    matching = max_bipartite_matching(adjacency, ["a", "b", "c"])
    assert len(matching) == 3
    assert len(set(matching.values())) == len(matching)
    assert all(right in adjacency[left] for left, right in matching.items())


def test_matching_limited_by_right_side():
    adjacency = {1: ["r"], 2: ["r"], 3: ["r"]}
    matching = max_bipartite_matching(adjacency, [1, 2, 3])
    assert list(matching.values()) == ["r"]


def test_unknown_left_vertex_stays_unmatched():
    matching = max_bipartite_matching({1: ["x"]}, [1, 2])
    assert matching == {1: "x"}


def test_isolated_cells_each_need_a_piece():
    grid = ["*o*", "ooo", "*o*"]
    expected = sum(row.count("*") for row in grid)
    assert min_cover_cells(grid) == expected


def test_two_adjacent_cells_share_a_piece():
    assert min_cover_cells(["**"]) == 1


def test_empty_grid_needs_nothing():
    assert min_cover_cells(["ooo", "ooo"]) == 0


def test_cover_never_exceeds_cell_count():
    grid = ["***", "*o*", "***"]
    cells = sum(len(row) - row.count("o") for row in grid)
    result = min_cover_cells(grid)
    assert (cells + 1) // 2 <= result <= cells


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        min_cover_cells(["**", "*"])