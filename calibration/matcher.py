"""Incremental digit matcher.

Scans characters left to right while keeping a *frontier*: the trie
nodes of every digit word that could still be completed by the
characters to come. A new word may start at any character, even one
that is in the middle of another word, so overlapping spellings such
as "eightwo" or "twone" are recognised without backtracking.

The first position at which anything completes decides the result:
a literal digit, or the last letter of a digit word.
"""

from __future__ import annotations

import unicodedata
from typing import Iterable

from calibration.trie import ROOT, Trie

NUMERIC_CATEGORIES = frozenset({"Nd", "Nl", "No"})


def literal_digit(ch: str) -> int | None:
    """Value of a numeric character, else None.

    ASCII ``0``-``9`` give their value. Any other Unicode number
    (``²``, ``½``, ``٣``) still counts as a digit but reads as 0.
    """
    if len(ch) != 1:
        return None
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if unicodedata.category(ch) in NUMERIC_CATEGORIES:
        return 0
    return None


def find_digit(chars: Iterable[str], trie: Trie) -> int | None:
    """First digit in ``chars``, literal or spelled with a word of ``trie``."""
    frontier: list[int] = []
    for ch in chars:
        digit = literal_digit(ch)
        if digit is not None:
            return digit

        advanced: list[int] = []
        for index in frontier:
            child = trie.child(index, ch)
            if child is None:
                continue
            value = trie.value(child)
            if value is not None:
                return value
            advanced.append(child)

        # a word might be starting from this character on
        start = trie.child(ROOT, ch)
        if start is not None:
            value = trie.value(start)
            if value is not None:
                return value
            advanced.append(start)

        frontier = advanced
    return None
