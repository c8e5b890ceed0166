"""Calibration value of a single line."""

from __future__ import annotations

import logging
from functools import lru_cache

from calibration.constants import FIGURES, REVERSED_FIGURES
from calibration.matcher import find_digit
from calibration.trie import Trie

log = logging.getLogger("calibration")


@lru_cache(maxsize=None)
def default_tries() -> tuple[Trie, Trie]:
    """Forward and reversed digit-word tries, built once per process."""
    forward = Trie.build(FIGURES)
    backward = Trie.build(REVERSED_FIGURES)
    log.debug("Built digit tries: %d forward nodes, %d reversed nodes", len(forward), len(backward))
    return forward, backward


class LineScorer:
    """Combines the first and last digit of a line into a two-digit value.

    The last digit is found by scanning the line back to front against a
    trie of reversed spellings, so "owt" read forward matches "two" read
    from the end.
    """

    def __init__(self, forward: Trie | None = None, backward: Trie | None = None):
        default_forward, default_backward = default_tries()
        if forward is None:
            forward = default_forward
        if backward is None:
            backward = default_backward
        self.forward = forward
        self.backward = backward

    def digits(self, line: str) -> tuple[int | None, int | None]:
        """(first, last) digit of ``line``.

        A line whose forward scan finds nothing is not scanned in
        reverse at all and gives (None, None).
        """
        first = find_digit(line, self.forward)
        if first is None:
            return None, None
        return first, find_digit(reversed(line), self.backward)

    def score(self, line: str) -> int:
        first, last = self.digits(line)
        if first is None:
            return 0
        return first * 10 + (last or 0)


def score_line(line: str, scorer: LineScorer | None = None) -> int:
    """Calibration value of ``line`` (0..99), 0 when it holds no digit."""
    if scorer is None:
        scorer = LineScorer()
    return scorer.score(line)
