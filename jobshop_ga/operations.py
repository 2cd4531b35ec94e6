"""Genome utilities: canonical genome, decoding and validation.

Concepts
--------
Genome
    A sequence of job ids (1-based). Job ``j`` occurs exactly as many times
    as it has tasks; the n-th occurrence (left to right) stands for the
    operation ``(j, n)``. Any ordering of such a multiset respects each
    job's technological order by construction, which is why the GA can
    shuffle and recombine genomes freely.
"""

from __future__ import annotations

from typing import Iterable

from .errors import InvalidGenomeError
from .models import ProblemModel, OperationKey


def create_base_genome(problem: ProblemModel) -> list[int]:
    """Create the canonical job-major genome.

    Args:
        problem: Problem instance.

    Returns:
        List with each job id repeated once per task, jobs concatenated in
        problem order, e.g. ``[1, 1, 1, 2, 2, 3]``.
    """
    genome: list[int] = []
    for job_id, job in enumerate(problem.jobs, start=1):
        genome.extend([job_id] * len(job))
    return genome


def decode_genome(problem: ProblemModel, genome: Iterable[int]) -> list[OperationKey]:
    """Turn a genome into the ordered list of operations it denotes.

    Args:
        problem: Problem instance supplying task counts per job.
        genome: Sequence of job ids.

    Returns:
        List of ``(job_id, task_index)`` in genome order.

    Raises:
        InvalidGenomeError: If a job id is unknown or any job's occurrence
            count differs from its task count.
    """
    jobs_number = problem.jobs_number
    seen = [0] * (jobs_number + 1)
    operations: list[OperationKey] = []
    for job_id in genome:
        if not (1 <= job_id <= jobs_number):
            raise InvalidGenomeError(f"Job id out of range: {job_id}")
        seen[job_id] += 1
        operations.append((job_id, seen[job_id]))
    for job_id, job in enumerate(problem.jobs, start=1):
        if seen[job_id] != len(job):
            raise InvalidGenomeError(
                f"Job {job_id} occurs {seen[job_id]} times, expected {len(job)}"
            )
    return operations


def validate_genome(problem: ProblemModel, genome: Iterable[int]) -> bool:
    """Validate a genome's occurrence counts.

    Returns:
        True if the genome is valid, so the call can sit inside assertions.

    Raises:
        InvalidGenomeError: See :func:`decode_genome`.
    """
    decode_genome(problem, genome)
    return True
