import pytest

from cpkit.interval_dp import (
    longest_palindromic_subsequence,
    matrix_chain_cost,
    min_palindrome_cuts,
    schedule_talks,
)
from cpkit.subsequences import lcs_length

TEXTS = ["", "a", "bbbab", "character", "agbdba", "abcde", "racecar"]

TALKS = [
    (8.00, 10.00, 35),
    (9.00, 11.00, 30),
    (10.30, 12.00, 25),
    (9.30, 13.00, 20),
    (8.30, 14.00, 15),
    (11.00, 14.00, 10),
    (13.00, 14.00, 5),
]


def _is_palindrome(s):
    return s == s[::-1]


@pytest.mark.parametrize("text", TEXTS)
def test_lps_equals_lcs_with_reverse(text):
    assert longest_palindromic_subsequence(text) == lcs_length(text, text[::-1])


@pytest.mark.parametrize("text", ["racecar", "abba", "z"])
def test_lps_of_palindrome_is_whole(text):
    assert longest_palindromic_subsequence(text) == len(text)


@pytest.mark.parametrize("text", TEXTS[1:])
def test_lps_bounds(text):
    assert 1 <= longest_palindromic_subsequence(text) <= len(text)


def test_matrix_chain_single_matrix_costs_nothing():
    assert matrix_chain_cost([10, 20]) == 0


def test_matrix_chain_two_matrices():
    dims = [10, 20, 30]
    assert matrix_chain_cost(dims) == dims[0] * dims[1] * dims[2]


def test_matrix_chain_known_case():
    assert matrix_chain_cost([40, 20, 30, 10, 30]) == 26000


def test_matrix_chain_rejects_non_positive():
    with pytest.raises(ValueError):
        matrix_chain_cost([10, 0, 5])


@pytest.mark.parametrize("text", ["racecar", "aa", "x", ""])
def test_palindrome_needs_no_cuts(text):
    assert min_palindrome_cuts(text) == 0


@pytest.mark.parametrize("text", ["abcde", "xyz"])
def test_distinct_letters_need_cut_between_each(text):
    assert min_palindrome_cuts(text) == len(text) - 1


@pytest.mark.parametrize("text", TEXTS[1:])
def test_cuts_bounded(text):
    cuts = min_palindrome_cuts(text)
    assert 0 <= cuts <= len(text) - 1
    assert (cuts == 0) == _is_palindrome(text)


def test_schedule_worked_example():
    assert schedule_talks(TALKS) == (65, [0, 2, 6])


def test_schedule_choice_is_consistent():
    total, chosen = schedule_talks(TALKS)
    assert sum(TALKS[i][2] for i in chosen) == total
    for a, b in zip(chosen, chosen[1:]):
        assert TALKS[a][1] <= TALKS[b][0]


def test_schedule_empty():
    assert schedule_talks([]) == (0, [])


def test_schedule_rejects_backwards_talk():
    with pytest.raises(ValueError):
        schedule_talks([(10.0, 9.0, 5)])