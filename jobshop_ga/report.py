"""CSV progress report: one header line, then one line per generation."""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from typing import IO, Iterable, Iterator, Optional

from .algorithms.base import GenerationStats

REPORT_HEADER = "Generation,Mean fitness,Best fitness"

logger = logging.getLogger("jssp.report")


def format_generation(stats: GenerationStats) -> str:
    return f"{stats.generation},{stats.mean:f},{stats.best}"


def write_report(history: Iterable[GenerationStats], stream: IO[str]) -> None:
    stream.write(REPORT_HEADER + "\n")
    for stats in history:
        stream.write(format_generation(stats) + "\n")


@contextmanager
def open_report_file(path: Optional[str]) -> Iterator[Optional[IO[str]]]:
    """Context manager yielding a report file with the header written.

    Yields None when ``path`` is empty or the file cannot be opened; the
    run goes on with stdout reporting only.
    """
    report_file = None
    if path:
        try:
            os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
            report_file = open(path, "w", encoding="utf-8")
            report_file.write(REPORT_HEADER + "\n")
        except OSError as e:
            logger.warning("Failed to open report file %s: %s", path, e)
            report_file = None
    try:
        yield report_file
    finally:
        if report_file:
            report_file.close()
