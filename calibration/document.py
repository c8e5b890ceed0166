"""Calibration documents: reading them and summing their line values."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from calibration.constants import DEFAULT_WORKERS
from calibration.scorer import LineScorer

log = logging.getLogger("calibration")


class DocumentError(Exception):
    """A calibration document could not be loaded."""

    def __init__(self, path: Path | str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class DocumentNotFoundError(DocumentError):
    pass


class DocumentReadError(DocumentError):
    pass


class DocumentEncodingError(DocumentError):
    pass


def read_document(path: Path | str) -> str:
    """Whole contents of the UTF-8 document at ``path``."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
        raise DocumentNotFoundError(path, "no such file") from exc
    except OSError as exc:
        raise DocumentReadError(path, exc.strerror or str(exc)) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentEncodingError(path, f"not valid UTF-8 ({exc.reason} at byte {exc.start})") from exc
    log.info("Loaded %s bytes from %s", f"{len(data):,}", path)
    return text


def split_lines(document: str) -> list[str]:
    """Lines of ``document``, split on ``\\n`` only.

    A ``\\r`` right before a ``\\n`` is dropped with it; a final newline
    does not start another line. Other control characters stay in the
    line they appear in.
    """
    pieces = document.split("\n")
    tail = pieces.pop()
    lines = [piece[:-1] if piece.endswith("\r") else piece for piece in pieces]
    if tail:
        lines.append(tail)
    return lines


def score_lines(document: str, scorer: LineScorer | None = None) -> list[int]:
    """Calibration value of every line, in document order."""
    if scorer is None:
        scorer = LineScorer()
    return [scorer.score(line) for line in split_lines(document)]


def _chunk_total(lines: list[str], scorer: LineScorer) -> int:
    return sum(scorer.score(line) for line in lines)


def total(document: str, scorer: LineScorer | None = None, workers: int = DEFAULT_WORKERS) -> int:
    """Sum of the calibration values of all lines of ``document``.

    With ``workers`` > 1 the lines are split into contiguous chunks and
    scored on a thread pool. The tries are only read, so the workers
    share one scorer; the chunk sums are added in any order.
    """
    if workers < 1:
        raise ValueError(f"workers must be at least 1, got {workers}")
    if scorer is None:
        scorer = LineScorer()

    lines = split_lines(document)
    if workers == 1 or len(lines) < 2:
        result = _chunk_total(lines, scorer)
        log.debug("Scored %d lines sequentially: %d", len(lines), result)
        return result

    max_workers = min(workers, len(lines))
    size = -(-len(lines) // max_workers)
    chunks = [lines[i:i + size] for i in range(0, len(lines), size)]
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(_chunk_total, chunk, scorer) for chunk in chunks]
        result = sum(fut.result() for fut in futures)
    log.debug("Scored %d lines in %d chunks on %d workers: %d",
              len(lines), len(chunks), max_workers, result)
    return result
