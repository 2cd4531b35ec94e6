"""Common structures and helper functions for the evolutionary loop."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from jobshop_ga.errors import ValidationError
from jobshop_ga.genetic import DEFAULT_MUTATION_PROBABILITY
from jobshop_ga.models import GenomeFitness

PAIRING_MODES = ("growing", "fixed")


@dataclass(slots=True)
class GAParams:
    """Bundle of the GA hyper-parameters.

    ``pairing`` selects how the breeding loop bounds the ``i`` / ``2*i``
    pairing: ``"growing"`` re-checks ``i < len(pool) // 2`` against the pool
    as children are appended, ``"fixed"`` uses the survivor count only.
    """

    population_size: int = 50
    generations: int = 50
    selection_margin: float = 0.7
    mutation_probability: float = DEFAULT_MUTATION_PROBABILITY
    pairing: str = "growing"

    def __post_init__(self) -> None:
        if self.population_size < 1:
            raise ValidationError(f"population_size must be >= 1: {self.population_size}")
        if self.generations < 0:
            raise ValidationError(f"generations must be >= 0: {self.generations}")
        if not (0.0 <= self.mutation_probability <= 1.0):
            raise ValidationError(
                f"mutation_probability must lie in [0, 1]: {self.mutation_probability}"
            )
        if self.pairing not in PAIRING_MODES:
            raise ValidationError(f"Unknown pairing mode: {self.pairing}")


@dataclass(frozen=True)
class GenerationStats:
    generation: int
    mean: float
    best: int


def population_stats(population: Sequence[GenomeFitness]) -> tuple[float, int]:
    """Return ``(mean, best)`` fitness of a non-empty population."""
    total = sum(member.fitness for member in population)
    best = min(member.fitness for member in population)
    return total / len(population), best


@dataclass
class EvolutionState:
    """Shared state of one GA run."""

    best: Optional[GenomeFitness] = None
    history: List[GenerationStats] = field(default_factory=list)
    start_time: float = field(default_factory=time.time)
    evaluations: int = 0

    def update_best(self, candidate: GenomeFitness) -> bool:
        """Update best member. Returns True if improved."""
        if self.best is None or candidate.fitness < self.best.fitness:
            self.best = candidate
            return True
        return False

    def elapsed_ms(self) -> int:
        """Return elapsed time from start in ms."""
        return int((time.time() - self.start_time) * 1000)
