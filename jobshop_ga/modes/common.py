"""Shared primitives used by execution modes.

A thin dispatch helper (`run_ga`) so that each mode (single run, `auto`)
invokes the GA uniformly without duplicating timing collection code.
"""
from __future__ import annotations

import random
import time
from typing import Callable, Optional

from jobshop_ga.algorithms.base import GAParams, GenerationStats
from jobshop_ga.algorithms.ga import genetic_algorithm
from jobshop_ga.evaluation import CacheType
from jobshop_ga.models import GenomeFitness, ProblemModel


def run_ga(
    instance: ProblemModel,
    params: GAParams,
    rng: random.Random,
    cache: Optional[CacheType] = None,
    on_generation: Optional[Callable[[GenerationStats], None]] = None,
) -> tuple[GenomeFitness, list[GenerationStats], float]:
    """Execute one GA run and return its result triple.

    Args:
        instance: Problem instance.
        params: GA hyper-parameters.
        rng: Random generator owned by the caller.
        cache: Optional evaluation cache (shared across runs of the same
            instance).
        on_generation: Forwarded to :func:`genetic_algorithm`.

    Returns:
        Tuple ``(best, history, elapsed_seconds)``.
    """
    t0 = time.perf_counter()
    best, history = genetic_algorithm(
        instance,
        params,
        rng=rng,
        cache=cache,
        on_generation=on_generation,
    )
    return best, history, time.perf_counter() - t0
