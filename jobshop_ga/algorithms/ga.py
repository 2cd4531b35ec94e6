"""Genetic algorithm for the job-shop scheduling problem."""

from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional, Tuple

from jobshop_ga.algorithms.base import (
    EvolutionState,
    GAParams,
    GenerationStats,
    population_stats,
)
from jobshop_ga.evaluation import CacheType, evaluate
from jobshop_ga.genetic import crossover, mutate, random_genome
from jobshop_ga.models import GenomeFitness, ProblemModel

logger = logging.getLogger("jssp.ga")


def make_member(
    problem: ProblemModel,
    genome: list[int],
    cache: Optional[CacheType] = None,
) -> GenomeFitness:
    """Freeze a genome and evaluate it right away."""
    frozen = tuple(genome)
    return GenomeFitness(genome=frozen, fitness=evaluate(problem, frozen, cache=cache))


def initialize_population(
    problem: ProblemModel,
    count: int,
    rng: random.Random,
    cache: Optional[CacheType] = None,
) -> List[GenomeFitness]:
    """Build ``count`` shuffled genomes, each evaluated on creation."""
    return [make_member(problem, random_genome(problem, rng), cache) for _ in range(count)]


def select_survivors(
    population: List[GenomeFitness],
    mean: float,
    margin: float,
    capacity: int,
) -> List[GenomeFitness]:
    """Members with ``fitness <= mean - margin``, in order, at most ``capacity``."""
    threshold = mean - margin
    pool: List[GenomeFitness] = []
    for member in population:
        if member.fitness <= threshold and len(pool) < capacity:
            pool.append(member)
    return pool


def breed(
    problem: ProblemModel,
    pool: List[GenomeFitness],
    rng: random.Random,
    mutation_probability: float,
    pairing: str = "growing",
    cache: Optional[CacheType] = None,
) -> List[GenomeFitness]:
    """Pair member ``i`` with member ``2*i`` and append one child per pair.

    With ``pairing="growing"`` the bound ``len(pool) // 2`` is re-read after
    every child, so late pairs may draw on children bred earlier in the same
    call. With ``pairing="fixed"`` only the survivors present on entry set
    the bound. Returns a new list; ``pool`` itself is not modified.
    """
    next_pool = list(pool)
    fixed_bound = len(pool) // 2
    i = 0
    while i < (len(next_pool) // 2 if pairing == "growing" else fixed_bound):
        parent_a = next_pool[i].genome
        parent_b = next_pool[2 * i].genome
        child = mutate(crossover(parent_a, parent_b, rng), rng, mutation_probability)
        next_pool.append(make_member(problem, child, cache))
        i += 1
    return next_pool


def genetic_algorithm(
    problem: ProblemModel,
    params: GAParams,
    rng: Optional[random.Random] = None,
    cache: Optional[CacheType] = None,
    on_generation: Optional[Callable[[GenerationStats], None]] = None,
) -> Tuple[GenomeFitness, List[GenerationStats]]:
    """GA main loop: report, select, breed, replace.

    Args:
        problem: Problem instance.
        params: Hyper-parameters (population size, generations, margin...).
        rng: Random generator; a fresh unseeded one when None.
        cache: Optional genome -> makespan cache shared across evaluations.
        on_generation: Called with each generation's statistics as soon as
            they are computed.

    Returns:
        ``(best, history)`` where ``best`` is the best member seen in any
        generation and ``history`` holds one entry per generation.
    """
    if rng is None:
        rng = random.Random()
    if cache is None:
        cache = {}
    state = EvolutionState()
    population = initialize_population(problem, params.population_size, rng, cache)
    state.evaluations += len(population)
    for member in population:
        state.update_best(member)

    for generation in range(1, params.generations + 1):
        mean, best = population_stats(population)
        stats = GenerationStats(generation=generation, mean=mean, best=best)
        state.history.append(stats)
        logger.info(
            "[ga] generation %d/%d size=%d mean=%.4f best=%d overall=%d",
            generation,
            params.generations,
            len(population),
            mean,
            best,
            state.best.fitness,
        )
        if on_generation is not None:
            on_generation(stats)

        pool = select_survivors(population, mean, params.selection_margin, params.population_size)
        if not pool:
            logger.warning(
                "[ga] generation %d: no member within margin %.2f of mean %.4f, "
                "population carried over",
                generation,
                params.selection_margin,
                mean,
            )
            continue
        next_population = breed(
            problem, pool, rng, params.mutation_probability, params.pairing, cache
        )
        state.evaluations += len(next_population) - len(pool)
        for member in next_population[len(pool):]:
            state.update_best(member)
        population = next_population

    logger.info(
        "[ga] done best=%d evaluations=%d elapsed_ms=%d",
        state.best.fitness,
        state.evaluations,
        state.elapsed_ms(),
    )
    return state.best, state.history
