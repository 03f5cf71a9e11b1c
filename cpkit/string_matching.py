"""Prefix function (KMP) and Manacher's palindrome radii."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

__all__ = ["prefix_function", "find_occurrences", "palindrome_radii"]

_SEPARATOR = object()


def prefix_function(text: Sequence[Any]) -> list[int]:
    """For each position, the length of the longest proper border of ``text[:i+1]``."""
    pi = [0] * len(text)
    for i in range(1, len(text)):
        j = pi[i - 1]
        while j and text[i] != text[j]:
            j = pi[j - 1]
        if text[i] == text[j]:
            j += 1
        pi[i] = j
    return pi


def find_occurrences(pattern: Sequence[Any], text: Sequence[Any]) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included."""
    m = len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    combined = [*pattern, _SEPARATOR, *text]
    return [i - 2 * m for i, border in enumerate(prefix_function(combined)) if border == m]


def palindrome_radii(text: Sequence[Any]) -> tuple[list[int], list[int]]:
    """Return Manacher's odd and even palindrome radii for each position.

    ``odd[i]`` counts the odd palindromes centred at ``i``; ``even[i]`` counts
    the even palindromes whose right centre is ``i``.
    """
    n = len(text)
    odd = [0] * n
    lo, hi = 0, -1
    for i in range(n):
        k = 1 if i > hi else min(odd[lo + hi - i], hi - i + 1)
        while 0 <= i - k and i + k < n and text[i - k] == text[i + k]:
            k += 1
        odd[i] = k
        k -= 1
        if i + k > hi:
            lo, hi = i - k, i + k
    even = [0] * n
    lo, hi = 0, -1
    for i in range(n):
        k = 0 if i > hi else min(even[lo + hi - i + 1], hi - i + 1)
        while 0 <= i - k - 1 and i + k < n and text[i - k - 1] == text[i + k]:
            k += 1
        even[i] = k
        k -= 1
        if i + k > hi:
            lo, hi = i - k - 1, i + k
    return odd, even