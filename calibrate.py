#!/usr/bin/env python3
"""
Calibration document reader

Recovers the calibration value of every line of a calibration document
(first and last digit, literal or spelled out as a word) and prints
their sum together with the time the computation took.

Usage: python calibrate.py --cal-doc FILE [--workers N] [--per-line] [-v]
"""

import sys

from calibration.cli import main

if __name__ == "__main__":
    sys.exit(main())
