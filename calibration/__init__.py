"""Calibration document reader -- modular package."""

from calibration.constants import FIGURES, REVERSED_FIGURES, reverse_vocabulary
from calibration.trie import ROOT, Trie, TrieNode
from calibration.matcher import find_digit, literal_digit
from calibration.scorer import LineScorer, default_tries, score_line
from calibration.document import (
    DocumentEncodingError,
    DocumentError,
    DocumentNotFoundError,
    DocumentReadError,
    read_document,
    score_lines,
    split_lines,
    total,
)

__version__ = "0.1.0"

__all__ = [
    "FIGURES",
    "REVERSED_FIGURES",
    "ROOT",
    "DocumentEncodingError",
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentReadError",
    "LineScorer",
    "Trie",
    "TrieNode",
    "default_tries",
    "find_digit",
    "literal_digit",
    "read_document",
    "reverse_vocabulary",
    "score_line",
    "score_lines",
    "split_lines",
    "total",
]
