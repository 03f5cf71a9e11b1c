import random
from itertools import product

import pytest

from cpkit.fenwick import FenwickTree, count_candy_distributions, distinct_in_ranges


def test_prefix_and_range_sums_follow_adds():
    rng = random.Random(3)
    size = 30
    model = [0] * size
    tree = FenwickTree(size)
    for _ in range(200):
        i = rng.randrange(size)
        delta = rng.randint(-9, 9)
        tree.add(i, delta)
        model[i] += delta
        j = rng.randrange(size)
        assert tree.prefix_sum(j) == sum(model[: j + 1])
        left = rng.randrange(size)
        right = rng.randrange(left, size)
        assert tree.range_sum(left, right) == sum(model[left : right + 1])


def test_prefix_before_start_is_zero():
    tree = FenwickTree(4)
    tree.add(0, 5)
    assert tree.prefix_sum(-1) == 0
    assert tree.range_sum(0, 0) == 5


def test_out_of_range_raises():
    tree = FenwickTree(3)
    with pytest.raises(IndexError):
        tree.add(3, 1)
    with pytest.raises(IndexError):
        tree.prefix_sum(3)
    with pytest.raises(ValueError):
        FenwickTree(-2)


def test_distinct_counts_match_sets():
    rng = random.Random(8)
    values = [rng.randint(1, 6) for _ in range(25)]
    queries = []
    for _ in range(60):
        left = rng.randrange(len(values))
        queries.append((left, rng.randrange(left, len(values))))
    answers = distinct_in_ranges(values, queries)
    assert answers == [len(set(values[l : r + 1])) for l, r in queries]


def test_distinct_rejects_bad_query():
    with pytest.raises(IndexError):
        distinct_in_ranges([1, 2], [(1, 2)])


def test_distinct_with_no_queries():
    assert distinct_in_ranges([1, 1, 2], []) == []


@pytest.mark.parametrize("total", range(0, 7))
def test_single_child(total):
    assert count_candy_distributions([4], total) == (1 if total <= 4 else 0)


@pytest.mark.parametrize(
    "limits,total",
    [([1, 2, 3], 4), ([2, 2, 2, 2], 5), ([0, 3, 1], 2), ([3, 0], 3), ([5, 1, 4, 2], 0)],
)
def test_candies_match_enumeration(limits, total):
    expected = sum(
        1
        for combo in product(*(range(a + 1) for a in limits))
        if sum(combo) == total
    )
    assert count_candy_distributions(limits, total) == expected


def test_candies_no_children():
    assert count_candy_distributions([], 0) == 1
    assert count_candy_distributions([], 3) == 0


def test_candies_negative_total_raises():
    with pytest.raises(ValueError):
        count_candy_distributions([1, 2], -1)