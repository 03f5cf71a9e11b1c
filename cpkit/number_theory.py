"""Prime sieves, factorisation, divisor counting and base conversion."""

from __future__ import annotations

from bisect import bisect_right
from collections import defaultdict
from collections.abc import Iterable, Sequence
from itertools import accumulate
from math import isqrt

__all__ = [
    "sieve",
    "bitwise_sieve",
    "segmented_sieve",
    "least_prime_factors",
    "factorize",
    "count_divisors",
    "divisor_sum_queries",
    "factorial_prime_exponent",
    "to_base_digits",
]


def sieve(n: int) -> list[int]:
    """Return all primes up to and including ``n``."""
    if n < 2:
        return []
    is_prime = bytearray([1]) * (n + 1)
    is_prime[0] = is_prime[1] = 0
    for i in range(2, isqrt(n) + 1):
        if is_prime[i]:
            is_prime[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return [i for i, flag in enumerate(is_prime) if flag]


def bitwise_sieve(n: int) -> list[int]:
    """Return all primes up to ``n``, keeping one bit per number."""
    if n < 2:
        return []
    bits = bytearray(n // 8 + 1)

    def is_marked(i: int) -> bool:
        return bool(bits[i >> 3] & (1 << (i & 7)))

    def mark(i: int) -> None:
        bits[i >> 3] |= 1 << (i & 7)

    for i in range(3, isqrt(n) + 1, 2):
        if not is_marked(i):
            for j in range(i * i, n + 1, 2 * i):
                mark(j)
    return [2, *(i for i in range(3, n + 1, 2) if not is_marked(i))]


def segmented_sieve(low: int, high: int) -> list[int]:
    """Return the primes in the closed range ``[low, high]``."""
    low = max(low, 2)
    if high < low:
        return []
    composite = bytearray(high - low + 1)
    for p in sieve(isqrt(high)):
        start = max(p * p, -(-low // p) * p)
        if start > high:
            continue
        composite[start - low :: p] = b"\x01" * len(range(start, high + 1, p))
    return [low + i for i, flag in enumerate(composite) if not flag]


def least_prime_factors(limit: int) -> list[int]:
    """Return a table whose entry ``i`` is the least prime factor of ``i``.

    Entry 0 is 0 and entry 1 is 1.
    """
    lpf = [0] * (limit + 1)
    if limit >= 1:
        lpf[1] = 1
    for i in range(2, isqrt(limit) + 1):
        if lpf[i] == 0:
            lpf[i] = i
            for j in range(i * i, limit + 1, i):
                if lpf[j] == 0:
                    lpf[j] = i
    for i in range(2, limit + 1):
        if lpf[i] == 0:
            lpf[i] = i
    return lpf


def factorize(n: int, lpf: Sequence[int]) -> list[int]:
    """Split ``n`` into its prime factors, smallest first, using an lpf table."""
    if n < 1:
        raise ValueError("n must be positive")
    if n >= len(lpf):
        raise ValueError(f"{n} is beyond the factor table (size {len(lpf)})")
    factors = []
    while n > 1:
        factors.append(lpf[n])
        n //= lpf[n]
    return factors


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    return all(n % d for d in range(3, isqrt(n) + 1, 2))


def count_divisors(n: int) -> int:
    """Return the number of positive divisors of ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    total = 1
    p = 2
    while p * p * p <= n:
        exponent = 0
        while n % p == 0:
            n //= p
            exponent += 1
        total *= exponent + 1
        p += 1 if p == 2 else 2
    # What remains has at most two prime factors.
    if n == 1:
        return total
    if _is_prime(n):
        return total * 2
    root = isqrt(n)
    if root * root == n and _is_prime(root):
        return total * 3
    return total * 4


def divisor_sum_queries(values: Iterable[int], thresholds: Iterable[int]) -> list[int]:
    """For each threshold, sum the values whose divisor count is at most it."""
    by_count: defaultdict[int, int] = defaultdict(int)
    for value in values:
        by_count[count_divisors(value)] += value
    counts = sorted(by_count)
    running = list(accumulate(by_count[c] for c in counts))
    answers = []
    for threshold in thresholds:
        idx = bisect_right(counts, threshold)
        answers.append(running[idx - 1] if idx else 0)
    return answers


def factorial_prime_exponent(n: int, p: int) -> int:
    """Return the exponent of prime ``p`` in ``n!``."""
    if p < 2:
        raise ValueError("p must be a prime")
    if n < 0:
        raise ValueError("n must be non-negative")
    exponent = 0
    while n // p:
        n //= p
        exponent += n
    return exponent


def to_base_digits(n: int, base: int) -> list[int]:
    """Return the digits of ``n`` in ``base``, most significant first."""
    if base < 2:
        raise ValueError("base must be at least 2")
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return [0]
    digits = []
    while n:
        n, digit = divmod(n, base)
        digits.append(digit)
    digits.reverse()
    return digits