"""Prefix trie of digit words, stored as an arena of index-linked nodes."""

from __future__ import annotations

from typing import Iterable

ROOT = 0


class TrieNode:
    """Single node in the digit-word trie."""

    __slots__ = ("children", "value")

    def __init__(self):
        self.children: dict[str, int] = {}
        self.value: int | None = None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        return self.value == other.value and self.children == other.children

    def __repr__(self) -> str:
        return f"TrieNode(value={self.value!r}, children={self.children!r})"


class Trie:
    """Digit-word trie. Nodes live in one list and refer to their
    children by index; node 0 is the root. Only ``build`` adds nodes,
    so a built trie can be shared by any number of readers."""

    def __init__(self):
        self._nodes: list[TrieNode] = [TrieNode()]

    @classmethod
    def build(cls, vocabulary: Iterable[tuple[str, int]]) -> Trie:
        """Trie holding every (word, digit) pair of ``vocabulary``."""
        trie = cls()
        for word, value in vocabulary:
            trie._insert(word, value)
        return trie

    def _insert(self, word: str, value: int) -> None:
        index = ROOT
        for ch in word:
            child = self._nodes[index].children.get(ch)
            if child is None:
                child = len(self._nodes)
                self._nodes.append(TrieNode())
                self._nodes[index].children[ch] = child
            index = child
        self._nodes[index].value = value

    def child(self, index: int, ch: str) -> int | None:
        """Index of the child of ``index`` reached by ``ch``, or None."""
        return self._nodes[index].children.get(ch)

    def value(self, index: int) -> int | None:
        """Digit spelled by the path ending at ``index``, or None."""
        return self._nodes[index].value

    def lookup(self, word: str) -> int | None:
        index = self._walk(word)
        if index is None:
            return None
        return self._nodes[index].value

    def has_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def _walk(self, s: str) -> int | None:
        index = ROOT
        for ch in s:
            index = self._nodes[index].children.get(ch)
            if index is None:
                return None
        return index

    def __len__(self) -> int:
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trie):
            return NotImplemented
        return self._nodes == other._nodes
