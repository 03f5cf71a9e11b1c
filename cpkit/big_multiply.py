"""Schoolbook multiplication of decimal digit strings."""

from __future__ import annotations

__all__ = ["multiply", "multiply_reversed"]

_DIGITS = frozenset("0123456789")


def _check(digits: str) -> None:
    if not _DIGITS.issuperset(digits):
        raise ValueError(f"not a string of decimal digits: {digits!r}")


def multiply(num1: str, num2: str) -> str:
    """Return the decimal product of two decimal digit strings.

    An empty operand counts as zero.
    """
    _check(num1)
    _check(num2)
    if not num1 or not num2:
        return "0"
    result = [0] * (len(num1) + len(num2))
    for i, d1 in enumerate(reversed(num1)):
        a = int(d1)
        carry = 0
        for j, d2 in enumerate(reversed(num2)):
            carry, result[i + j] = divmod(a * int(d2) + result[i + j] + carry, 10)
        result[i + len(num2)] += carry
    text = "".join(map(str, reversed(result))).lstrip("0")
    return text or "0"


def multiply_reversed(digits: str, factor: int) -> str:
    """Multiply a little-endian digit string by ``factor``; the result is little-endian too."""
    _check(digits)
    if factor < 0:
        raise ValueError("factor must be non-negative")
    out = []
    carry = 0
    for ch in digits:
        carry, digit = divmod(carry + int(ch) * factor, 10)
        out.append(str(digit))
    while carry:
        carry, digit = divmod(carry, 10)
        out.append(str(digit))
    return "".join(out)