import pytest

from cpkit.ranges import (
    StarSky,
    capped_interval_cost,
    min_palindrome_sum_changes,
    min_paint_strokes,
    ternary_search_max,
)


def test_min_paint_strokes_example():
    assert min_paint_strokes([2, 2, 1, 2, 1]) == 3


def test_min_paint_strokes_equal_short_planks():
    assert min_paint_strokes([3] * 10) == 3


def test_min_paint_strokes_empty_and_zero():
    assert min_paint_strokes([]) == 0
    assert min_paint_strokes([0, 0, 0]) == 0


@pytest.mark.parametrize(
    "heights", [[5, 1, 5, 1, 5], [1, 2, 3, 4, 5], [10**9, 10**9], [4, 0, 4, 4]]
)
def test_min_paint_strokes_at_most_one_per_plank(heights):
    assert 0 <= min_paint_strokes(heights) <= len(heights)


def test_min_paint_strokes_long_fence():
    heights = [10**6] * 3000
    assert min_paint_strokes(heights) == len(heights)


@pytest.fixture
def sky():
    return StarSky([(1, 1, 1), (3, 2, 0)], 3)


def test_star_sky_example(sky):
    assert sky.brightness(2, 1, 1, 2, 2) == 3


@pytest.mark.parametrize("time", range(0, 8))
def test_star_sky_periodic(sky, time):
    assert sky.brightness(time, 1, 1, 5, 5) == sky.brightness(time + 4, 1, 1, 5, 5)


def test_star_sky_additive_over_split():
    stars = [(1, 1, 2), (2, 4, 5), (3, 3, 0), (4, 1, 4), (4, 4, 1)]
    grid = StarSky(stars, 5)
    for time in range(6):
        whole = grid.brightness(time, 1, 1, 4, 4)
        parts = grid.brightness(time, 1, 1, 2, 4) + grid.brightness(time, 3, 1, 4, 4)
        assert whole == parts


def test_star_sky_single_star_and_empty_area():
    grid = StarSky([(2, 3, 2)], 5)
    assert grid.brightness(0, 1, 1, 9, 9) == 2
    assert grid.brightness(0, 3, 1, 9, 9) == 0


def test_star_sky_validation():
    with pytest.raises(ValueError):
        StarSky([(1, 1, 4)], 3)
    with pytest.raises(ValueError):
        StarSky([(0, 1, 1)], 3)
    with pytest.raises(ValueError):
        StarSky([(1, 1, 1)], 3).brightness(0, 3, 1, 2, 2)


def test_palindrome_sum_already_constant():
    assert min_palindrome_sum_changes([1, 3, 2, 2, 1, 3], 3) == 0
    assert min_palindrome_sum_changes([], 4) == 0


@pytest.mark.parametrize(
    "values, k",
    [([1, 2, 1, 2], 2), ([6, 1, 1, 7, 6, 3, 4, 6], 7), ([5, 2, 6, 1, 3, 4], 6)],
)
def test_palindrome_sum_bounds(values, k):
    half = len(values) // 2
    result = min_palindrome_sum_changes(values, k)
    sums = [a + b for a, b in zip(values[:half], reversed(values[half:]))]
    most_common = max(sums.count(s) for s in sums)
    assert 0 <= result <= half
    assert result <= 2 * (half - most_common)


def test_palindrome_sum_validation():
    with pytest.raises(ValueError):
        min_palindrome_sum_changes([1, 2, 3], 3)
    with pytest.raises(ValueError):
        min_palindrome_sum_changes([1, 5], 3)


def test_capped_interval_cost_example():
    assert capped_interval_cost([(1, 2, 4), (2, 2, 2)], 6) == 10


def test_capped_interval_cost_extremes():
    intervals = [(1, 5, 3), (2, 8, 7), (100, 200, 1)]
    uncapped = sum(c * (b - a + 1) for a, b, c in intervals)
    assert capped_interval_cost(intervals, 10**9) == uncapped
    assert capped_interval_cost(intervals, 0) == 0
    assert capped_interval_cost([], 5) == 0


def test_capped_interval_cost_rejects_reversed_interval():
    with pytest.raises(ValueError):
        capped_interval_cost([(5, 2, 1)], 3)


@pytest.mark.parametrize(
    "func, low, high",
    [
        (lambda x: -((x - 7) ** 2), 0, 100),
        (lambda x: -abs(x + 30), -100, 50),
        (lambda x: x, 3, 4),
        (lambda x: -x * x + 40 * x, -5, 55),
    ],
)
def test_ternary_search_matches_range_maximum(func, low, high):
    assert ternary_search_max(func, low, high) == max(func(x) for x in range(low, high + 1))


def test_ternary_search_single_point_and_error():
    assert ternary_search_max(lambda x: x * 3, 5, 5) == 15
    with pytest.raises(ValueError):
        ternary_search_max(lambda x: x, 4, 3)