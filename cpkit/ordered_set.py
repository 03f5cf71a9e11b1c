"""A sorted set with rank and select queries."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["OrderedSet"]


class OrderedSet:
    """A set of distinct comparable items kept in ascending order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._items: list[Any] = sorted(set(items))

    def add(self, item: Any) -> None:
        """Insert ``item`` unless it is already present."""
        if item not in self:
            insort(self._items, item)

    def order_of_key(self, key: Any) -> int:
        """Return how many items are strictly less than ``key``."""
        return bisect_left(self._items, key)

    def find_by_order(self, index: int) -> Any:
        """Return the item at zero-based position ``index`` in sorted order."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} is outside [0, {len(self._items) - 1}]")
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        i = bisect_left(self._items, item)
        return i < len(self._items) and self._items[i] == item