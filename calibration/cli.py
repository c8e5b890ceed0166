"""Terminal front end for the calibration reader."""

from __future__ import annotations

import argparse
import logging
import time

from calibration.constants import DEFAULT_WORKERS
from calibration.document import DocumentError, read_document, score_lines, split_lines, total
from calibration.scorer import LineScorer

log = logging.getLogger("calibration")


def run_cli(document: str, workers: int = DEFAULT_WORKERS, per_line: bool = False) -> int:
    """Sum the document's calibration values and print the result."""
    scorer = LineScorer()

    t0 = time.perf_counter()
    result = total(document, scorer, workers=workers)
    elapsed = time.perf_counter() - t0

    if per_line:
        print("-" * 40)
        for i, (line, value) in enumerate(zip(split_lines(document), score_lines(document, scorer))):
            print(f" {i + 1:>5}  {value:>2}  {line}")
        print("-" * 40)

    print(f"sum of calibration values: {result}")
    print(f"took: {int(elapsed * 1_000_000)} µs")
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Sums the calibration values hidden in a calibration document",
    )
    parser.add_argument("--cal-doc", "-c", type=str, required=True, metavar="FILE",
                        help="Path to the calibration document")
    parser.add_argument("--workers", "-w", type=int, default=DEFAULT_WORKERS,
                        help="Worker threads used to score lines (default: %(default)s)")
    parser.add_argument("--per-line", action="store_true",
                        help="Also print every line's calibration value")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.workers < 1:
        log.error("--workers must be at least 1, got %d", args.workers)
        return 2

    try:
        document = read_document(args.cal_doc)
    except DocumentError as exc:
        log.error("Cannot read calibration document %s", exc)
        return 1

    run_cli(document, workers=args.workers, per_line=args.per_line)
    return 0
