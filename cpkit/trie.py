"""A prefix tree for whole-word membership."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["Trie"]


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


class Trie:
    """A set of words stored as a prefix tree."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.terminal = True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.terminal