"""Genetic operators over job-id genomes.

All randomness is drawn from the ``random.Random`` instance passed in by
the caller, so a seeded run is fully reproducible.
"""

from __future__ import annotations

import random
from typing import Sequence

from .models import ProblemModel
from .operations import create_base_genome

DEFAULT_MUTATION_PROBABILITY = 1.0 / 9.0


def random_genome(problem: ProblemModel, rng: random.Random) -> list[int]:
    """Canonical genome shuffled uniformly (Fisher-Yates)."""
    genome = create_base_genome(problem)
    rng.shuffle(genome)
    return genome


def crossover(
    parent_a: Sequence[int],
    parent_b: Sequence[int],
    rng: random.Random,
) -> list[int]:
    """Breed two parents; the donated slice of ``parent_a`` goes to the tail.

    Two cut points are drawn independently from ``[1, length - 2]`` and
    ordered. For each value of ``parent_a[s1:s2]`` the first matching
    occurrence is removed from a copy of ``parent_b``; the child is what
    remains of ``parent_b`` followed by the slice. Equal cut points donate
    an empty slice. The slice is not reinserted at ``s1``.

    Args:
        parent_a: Donor of the slice.
        parent_b: Donor of the relative order of the remaining genes.
        rng: Random generator.

    Returns:
        New list with the same length and job counts as the parents.
        Parents are left untouched.
    """
    length = len(parent_a)
    if length < 3:
        return list(parent_b)
    s1 = rng.randrange(length - 2) + 1
    s2 = rng.randrange(length - 2) + 1
    if s1 > s2:
        s1, s2 = s2, s1
    substring = list(parent_a[s1:s2])
    child = list(parent_b)
    for gene in substring:
        child.remove(gene)
    child.extend(substring)
    return child


def mutate(
    genome: list[int],
    rng: random.Random,
    probability: float = DEFAULT_MUTATION_PROBABILITY,
) -> list[int]:
    """Swap two random genes with the given probability, in place.

    Both positions are drawn independently from ``[0, len(genome) - 1)``
    (the last position is never picked); drawing the same position twice
    is a no-op swap.

    Returns:
        The same list object, so calls can be chained.
    """
    if len(genome) < 2:
        return genome
    if rng.random() < probability:
        i1 = rng.randrange(len(genome) - 1)
        i2 = rng.randrange(len(genome) - 1)
        genome[i1], genome[i2] = genome[i2], genome[i1]
    return genome
