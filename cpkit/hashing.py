"""Polynomial rolling hashes of lowercase strings."""

from __future__ import annotations

__all__ = ["HASH_BASE", "HASH_MOD", "polynomial_hash", "count_distinct_substrings"]

HASH_BASE = 31
HASH_MOD = 1_000_000_009


def _letter_value(ch: str) -> int:
    return ord(ch) - ord("a") + 1


def polynomial_hash(text: str) -> int:
    """Return the sum of ``value(text[i]) * 31**i`` modulo 1e9+9, with 'a' = 1."""
    result = 0
    power = 1
    for ch in text:
        result = (result + _letter_value(ch) * power) % HASH_MOD
        power = power * HASH_BASE % HASH_MOD
    return result


def count_distinct_substrings(text: str) -> int:
    """Count the distinct non-empty substrings of ``text`` by hashing."""
    n = len(text)
    if n == 0:
        return 0
    powers = [1] * n
    for i in range(1, n):
        powers[i] = powers[i - 1] * HASH_BASE % HASH_MOD
    prefix = [0] * (n + 1)
    for i, ch in enumerate(text):
        prefix[i + 1] = (prefix[i] + _letter_value(ch) * powers[i]) % HASH_MOD
    seen: set[tuple[int, int]] = set()
    for length in range(1, n + 1):
        for start in range(n - length + 1):
            raw = (prefix[start + length] - prefix[start]) % HASH_MOD
            # Shift every substring to the same highest power so they compare equal.
            seen.add((length, raw * powers[n - start - 1] % HASH_MOD))
    return len(seen)