"""Search algorithms module for the job shop scheduling problem.

Contains:
- Genetic Algorithm (GA) with simulation-based fitness
"""

from jobshop_ga.algorithms.base import GAParams, GenerationStats
from jobshop_ga.algorithms.ga import genetic_algorithm, initialize_population

__all__ = ["GAParams", "GenerationStats", "genetic_algorithm", "initialize_population"]
