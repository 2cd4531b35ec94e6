"""Core package for job-shop GA experiments.

Exports base data structures, the simulator and instance loading.
"""

from jobshop_ga.errors import InvalidGenomeError, ValidationError  # noqa: F401
from jobshop_ga.models import GenomeFitness, ProblemModel  # noqa: F401
from jobshop_ga.parser import load_instance  # noqa: F401
from jobshop_ga.simulator import simulate  # noqa: F401

__all__ = [
    "GenomeFitness",
    "InvalidGenomeError",
    "ProblemModel",
    "ValidationError",
    "load_instance",
    "simulate",
]
