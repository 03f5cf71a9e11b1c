"""Segment trees for range sums: point assignment and lazy range addition."""

from __future__ import annotations

from collections.abc import Iterable

__all__ = ["SegmentTree", "LazySegmentTree"]


def _check_range(left: int, right: int, size: int) -> None:
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] is outside [0, {size - 1}]")


class SegmentTree:
    """Sums over inclusive index ranges, with single-element assignment."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._tree = [0] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def query(self, left: int, right: int) -> int:
        """Return the sum of elements ``left`` through ``right`` inclusive."""
        _check_range(left, right, self._n)
        total = 0
        lo, hi = left + self._n, right + self._n + 1
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo >>= 1
            hi >>= 1
        return total

    def update(self, index: int, value: int) -> None:
        """Set element ``index`` to ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is outside [0, {self._n - 1}]")
        i = index + self._n
        self._tree[i] = value
        i >>= 1
        while i:
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]
            i >>= 1

    def total(self) -> int:
        """Return the sum of all elements."""
        return self.query(0, self._n - 1) if self._n else 0


class LazySegmentTree:
    """Sums over inclusive ranges of ``size`` zeros, with range addition."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        nodes = 4 * max(size, 1)
        self._sum = [0] * nodes
        self._pending = [0] * nodes

    def add(self, left: int, right: int, value: int) -> None:
        """Add ``value`` to every element from ``left`` to ``right`` inclusive."""
        _check_range(left, right, self.size)
        self._add(1, 0, self.size - 1, left, right, value)

    def _add(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if lo > right or hi < left:
            return
        if left <= lo and hi <= right:
            self._pending[node] += value
            return
        mid = (lo + hi) // 2
        lc, rc = 2 * node, 2 * node + 1
        self._add(lc, lo, mid, left, right, value)
        self._add(rc, mid + 1, hi, left, right, value)
        self._sum[node] = (
            self._sum[lc]
            + self._sum[rc]
            + self._pending[lc] * (mid - lo + 1)
            + self._pending[rc] * (hi - mid)
        )

    def query(self, left: int, right: int) -> int:
        """Return the sum of elements ``left`` through ``right`` inclusive."""
        _check_range(left, right, self.size)
        return self._query(1, 0, self.size - 1, left, right, 0)

    def _query(self, node: int, lo: int, hi: int, left: int, right: int, carry: int) -> int:
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sum[node] + (self._pending[node] + carry) * (hi - lo + 1)
        mid = (lo + hi) // 2
        carry += self._pending[node]
        return self._query(2 * node, lo, mid, left, right, carry) + self._query(
            2 * node + 1, mid + 1, hi, left, right, carry
        )