"""Genome fitness with memoisation.

A genome is decoded (and thereby validated) only the first time it is
seen; the cache maps the frozen genome to its makespan and recorded
schedule, so a member bred twice with the same genes is simulated once.
"""

from __future__ import annotations

from typing import Iterable

from .models import ProblemModel, Schedule
from .operations import decode_genome
from .simulator import simulate_operations

CacheType = dict[tuple[int, ...], tuple[int, Schedule]]


def evaluate(
    problem: ProblemModel,
    genome: Iterable[int],
    cache: CacheType | None = None,
    return_schedule: bool = False,
) -> int | tuple[int, Schedule]:
    """Makespan of ``genome``, plus its schedule when ``return_schedule``.

    Raises:
        InvalidGenomeError: On a cache miss with malformed occurrence counts.
    """
    frozen = tuple(genome)
    entry = cache.get(frozen) if cache is not None else None
    if entry is None:
        schedule = simulate_operations(problem, decode_genome(problem, frozen))
        entry = (schedule.cmax, schedule)
        if cache is not None:
            cache[frozen] = entry
    return entry if return_schedule else entry[0]
