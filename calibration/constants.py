"""Digit-word vocabulary and defaults for the calibration reader."""

from __future__ import annotations

# Spelled-out digits, in digit order. Zero is never spelled out.
FIGURES: tuple[tuple[str, int], ...] = (
    ("one", 1), ("two", 2), ("three", 3), ("four", 4),
    ("five", 5), ("six", 6), ("seven", 7), ("eight", 8), ("nine", 9),
)


def reverse_vocabulary(pairs: tuple[tuple[str, int], ...]) -> tuple[tuple[str, int], ...]:
    """Same pairs with every word spelled back to front ("one" -> "eno")."""
    return tuple((word[::-1], value) for word, value in pairs)


# Read forward, these match the words of FIGURES read from the end of a line.
REVERSED_FIGURES = reverse_vocabulary(FIGURES)

DEFAULT_WORKERS = 1
