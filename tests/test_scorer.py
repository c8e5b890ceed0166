"""Tests for the line scorer."""

import pytest

from calibration.constants import FIGURES, REVERSED_FIGURES
from calibration.scorer import LineScorer, default_tries, score_line
from calibration.trie import Trie


class TestScoreLine:
    """Tests for score_line."""

    @pytest.mark.parametrize(
        "line, expected",
        [
            ("1abc2", 12),
            ("pqr3stu8vwx", 38),
            ("a1b2c3d4e5f", 15),
            ("treb7uchet", 77),
            ("eightwothree", 83),
            ("twoeighthree", 23),
            ("fifour", 44),
            ("onine", 99),
            ("xtwone3four", 24),
            ("7pqrstsixteen", 76),
            ("oneight", 18),
            ("nineight", 98),
            ("one٣", 10),
            ("½xyz9", 9),
        ],
    )
    def test_known_lines(self, line, expected):
        assert score_line(line) == expected

    def test_literal_only_lines(self):
        """Without digit words the value is first and last literal digit."""
        for line in ["9", "x5y", "12345", "a0b0", "00", "ab4cd06"]:
            digits = [int(c) for c in line if c.isdigit()]
            assert score_line(line) == digits[0] * 10 + digits[-1]

    def test_empty_line(self):
        assert score_line("") == 0

    def test_no_digit_line(self):
        assert score_line("abcdefg") == 0
        assert score_line("zero ten eleven") == 0

    def test_in_range(self):
        for line in ["9nine", "nine9", "1", "one", "x"]:
            assert 0 <= score_line(line) <= 99


class TestLineScorer:
    """Tests for LineScorer."""

    def test_default_tries_are_shared(self):
        a, b = LineScorer(), LineScorer()
        assert a.forward is b.forward
        assert a.backward is b.backward
        assert default_tries() == (a.forward, a.backward)

    def test_digits(self):
        scorer = LineScorer()
        assert scorer.digits("two1nine") == (2, 9)
        assert scorer.digits("one") == (1, 1)
        assert scorer.digits("nothing") == (None, None)

    def test_forward_miss_skips_reverse_scan(self):
        """A line the forward scan cannot read scores 0, even if the
        reverse scan would find something."""
        forward = Trie.build([("one", 1)])
        backward = Trie.build([("xyz", 5)])
        scorer = LineScorer(forward, backward)
        assert scorer.digits("zyx") == (None, None)
        assert scorer.score("zyx") == 0

    def test_missing_last_digit_counts_as_zero(self):
        forward = Trie.build([("one", 1)])
        backward = Trie.build([("xyz", 5)])
        scorer = LineScorer(forward, backward)
        assert scorer.digits("one") == (1, None)
        assert scorer.score("one") == 10

    def test_custom_tries(self):
        scorer = LineScorer(Trie.build(FIGURES), Trie.build(REVERSED_FIGURES))
        assert scorer.score("eightwothree") == 83
        assert score_line("eightwothree", scorer) == 83
