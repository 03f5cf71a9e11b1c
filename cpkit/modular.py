"""Modular arithmetic: powers, inverses, discrete logarithms and binomials."""

from __future__ import annotations

from functools import cache
from math import isqrt

__all__ = [
    "MOD",
    "power_mod",
    "mod_inverse_prime",
    "extended_gcd",
    "mod_inverse",
    "discrete_log",
    "binomial",
    "binomial_recursive",
    "BinomialTable",
]

MOD = 1_000_000_007


def power_mod(base: int, exponent: int, mod: int = MOD) -> int:
    """Return ``base ** exponent`` modulo ``mod``."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if mod < 1:
        raise ValueError("mod must be positive")
    result = 1 % mod
    base %= mod
    while exponent:
        if exponent & 1:
            result = result * base % mod
        base = base * base % mod
        exponent >>= 1
    return result


def mod_inverse_prime(a: int, p: int) -> int:
    """Return the inverse of ``a`` modulo the prime ``p`` by Fermat's little theorem."""
    if a % p == 0:
        raise ValueError(f"{a} has no inverse modulo {p}")
    return power_mod(a, p - 2, p)


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    if b == 0:
        return a, 1, 0
    g, x1, y1 = extended_gcd(b, a % b)
    return g, y1, x1 - (a // b) * y1


def mod_inverse(a: int, m: int) -> int:
    """Return the inverse of ``a`` modulo any ``m`` coprime to it."""
    if m < 1:
        raise ValueError("modulus must be positive")
    g, x, _ = extended_gcd(a, m)
    if g != 1:
        raise ValueError(f"{a} and {m} are not coprime")
    return x % m


def discrete_log(a: int, b: int, m: int) -> int | None:
    """Find ``x >= 1`` with ``a**x == b (mod m)`` by baby-step giant-step.

    Returns None when no such ``x`` is found. Reliable when ``gcd(a, m) == 1``.
    """
    if m < 1:
        raise ValueError("modulus must be positive")
    if a == 0:
        return 1 if b == 0 else None
    a %= m
    b %= m
    n = isqrt(m) + 1
    giant = power_mod(a, n, m)
    baby: dict[int, int] = {}
    cur = b
    for q in range(n):
        baby[cur] = q
        cur = cur * a % m
    cur = 1
    for p in range(1, n + 1):
        cur = cur * giant % m
        if cur in baby:
            return n * p - baby[cur]
    return None


def binomial(n: int, r: int) -> int:
    """Return ``n choose r`` by the multiplicative formula."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")
    result = 1
    for i in range(1, r + 1):
        # Each partial product is itself a binomial, so the division is exact.
        result = result * (n - i + 1) // i
    return result


def binomial_recursive(n: int, r: int) -> int:
    """Return ``n choose r`` using Pascal's rule with memoisation."""
    if n < 0 or r < 0:
        raise ValueError("n and r must be non-negative")

    @cache
    def choose(n: int, r: int) -> int:
        if r > n:
            return 0
        if n == r or r == 0:
            return 1
        if r == 1:
            return n
        return choose(n - 1, r) + choose(n - 1, r - 1)

    return choose(n, r)


class BinomialTable:
    """Precomputed factorials for ``nCr`` modulo a prime, for ``n`` up to ``limit``."""

    def __init__(self, modulus: int, limit: int = 100) -> None:
        if limit < 0:
            raise ValueError("limit must be non-negative")
        if modulus < 2 or modulus <= limit:
            raise ValueError("modulus must be a prime larger than limit")
        self.modulus = modulus
        self.limit = limit
        factorials = [1]
        for i in range(1, limit + 1):
            factorials.append(factorials[-1] * i % modulus)
        inverses = [0] * (limit + 1)
        inverses[limit] = mod_inverse_prime(factorials[limit], modulus)
        for i in range(limit, 0, -1):
            inverses[i - 1] = inverses[i] * i % modulus
        self._factorials = factorials
        self._inverse_factorials = inverses

    def ncr(self, n: int, r: int) -> int:
        """Return ``n choose r`` modulo the table's prime."""
        if not 0 <= n <= self.limit:
            raise ValueError(f"n must lie in [0, {self.limit}]")
        if not 0 <= r <= n:
            return 0
        m = self.modulus
        return (
            self._factorials[n]
            * self._inverse_factorials[r]
            % m
            * self._inverse_factorials[n - r]
            % m
        )