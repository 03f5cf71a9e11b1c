import string

import pytest

from cpkit.hashing import HASH_BASE, HASH_MOD, count_distinct_substrings, polynomial_hash


def test_single_letter_value():
    assert polynomial_hash("a") == 1


def test_empty_hash():
    assert polynomial_hash("") == 0


@pytest.mark.parametrize(
    "left,right",
    [("abc", "def"), ("hello", "world"), ("", "xyz"), ("z" * 50, "q" * 40)],
)
def test_concatenation_law(left, right):
    expected = (
        polynomial_hash(left)
        + polynomial_hash(right) * pow(HASH_BASE, len(left), HASH_MOD)
    ) % HASH_MOD
    assert polynomial_hash(left + right) == expected


def test_hash_in_range_and_order_sensitive():
    text = string.ascii_lowercase * 20
    value = polynomial_hash(text)
    assert 0 <= value < HASH_MOD
    assert polynomial_hash("ab") != polynomial_hash("ba")


def test_count_empty():
    assert count_distinct_substrings("") == 0


@pytest.mark.parametrize("n", [1, 2, 5, 17])
def test_count_repeated_letter(n):
    assert count_distinct_substrings("a" * n) == n


@pytest.mark.parametrize("n", [1, 3, 10, 26])
def test_count_all_distinct_letters(n):
    text = string.ascii_lowercase[:n]
    assert count_distinct_substrings(text) == n * (n + 1) // 2


def test_count_invariant_under_reversal():
    text = "abacabadabacaba"
    assert count_distinct_substrings(text) == count_distinct_substrings(text[::-1])


def test_count_bounded_by_total_substrings():
    text = "mississippi"
    n = len(text)
    count = count_distinct_substrings(text)
    assert len(set(text)) <= count < n * (n + 1) // 2