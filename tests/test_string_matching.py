import pytest

from cpkit.string_matching import find_occurrences, palindrome_radii, prefix_function

SAMPLES = ["", "a", "aaaa", "abcabcd", "abacaba", "aabaaab", "banana", "abababc", "xyzzyx"]


def _is_palindrome(s):
    return s == s[::-1]


def test_prefix_function_example():
    assert prefix_function("aabaaab") == [0, 1, 0, 1, 2, 2, 3]


@pytest.mark.parametrize("text", SAMPLES)
def test_prefix_function_is_longest_border(text):
    pi = prefix_function(text)
    assert len(pi) == len(text)
    for i, p in enumerate(pi):
        assert p <= i
        assert text[:p] == text[i - p + 1 : i + 1]
        assert all(text[:q] != text[i - q + 1 : i + 1] for q in range(p + 1, i + 1))


def test_find_occurrences_overlapping():
    assert find_occurrences("aa", "aaaa") == [0, 1, 2]


@pytest.mark.parametrize(
    "pattern, text",
    [("ana", "banana"), ("ab", "abababc"), ("zz", "xyzzyx"), ("q", "banana"), ("abc", "ab")],
)
def test_find_occurrences_positions(pattern, text):
    found = find_occurrences(pattern, text)
    assert all(text[i : i + len(pattern)] == pattern for i in found)
    assert len(found) == sum(text.startswith(pattern, i) for i in range(len(text)))
    assert found == sorted(found)


def test_find_occurrences_on_lists():
    assert find_occurrences([1, 2], [1, 2, 1, 2]) == [0, 2]


def test_find_occurrences_rejects_empty_pattern():
    with pytest.raises(ValueError):
        find_occurrences("", "abc")


def test_palindrome_radii_example():
    odd, _ = palindrome_radii("abababc")
    assert odd == [1, 2, 3, 3, 2, 1, 1]


@pytest.mark.parametrize("text", SAMPLES)
def test_palindrome_radii_are_maximal(text):
    odd, even = palindrome_radii(text)
    n = len(text)
    assert len(odd) == len(even) == n
    for i, d in enumerate(odd):
        assert d >= 1
        assert _is_palindrome(text[i - d + 1 : i + d])
        assert i - d < 0 or i + d >= n or text[i - d] != text[i + d]
    for i, d in enumerate(even):
        assert _is_palindrome(text[i - d : i + d])
        assert i - d - 1 < 0 or i + d >= n or text[i - d - 1] != text[i + d]


def test_palindrome_radii_count_all_palindromes():
    text = "abacaba"
    odd, even = palindrome_radii(text)
    substrings = [text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)]
    assert sum(odd) + sum(even) == sum(_is_palindrome(s) for s in substrings)