"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


FIXTURE_LINES = [
    "two1nine",
    "eightwothree",
    "abcone2threexyz",
    "xtwone3four",
    "4nineeightseven2",
    "zoneight234",
    "7pqrstsixteen",
    "oneight",
    "one",
    "twone",
    "eightwo",
    "nineight",
    "eighthree",
    "nineeight",
    "eeeight",
    "oooneeone",
    "1",
    "eightwothree",
]


@pytest.fixture
def cal_doc():
    """The 18-line calibration document, newline terminated."""
    return "\n".join(FIXTURE_LINES) + "\n"


@pytest.fixture
def cal_doc_path(tmp_path, cal_doc):
    """The 18-line calibration document written to disk."""
    path = tmp_path / "cal_doc.txt"
    path.write_text(cal_doc, encoding="utf-8")
    return path
