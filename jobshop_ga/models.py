"""Core data structures for job-shop instances and GA individuals.

This module defines:
    Task          -- alias describing a single task (machine, duration).
    OperationKey  -- alias (job_id, task_index), both 1-based.
    ProblemModel  -- immutable container with all jobs for one instance.
    GenomeFitness -- a genome paired with its makespan.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import ValidationError

Task = tuple[int, int]  # (machine, duration)
OperationKey = tuple[int, int]  # (job_id, task_index), 1-based
Genome = tuple[int, ...]


@dataclass(frozen=True)
class ProblemModel:
    """Immutable representation of a job-shop instance.

    Attributes:
        jobs: Nested tuple: jobs[j][k] -> (machine, duration). Job ``j``
            is addressed as job id ``j + 1`` inside genomes.
        machines_number: Number of machines (M).

    Raises:
        ValidationError: If there are no jobs, a job has no tasks, a task
            references a machine outside ``[0, machines_number)`` or has a
            negative duration. Zero-duration tasks complete in their dispatch tick.
    """

    jobs: tuple[tuple[Task, ...], ...]
    machines_number: int

    def __post_init__(self) -> None:
        jobs = tuple(tuple((int(m), int(d)) for m, d in job) for job in self.jobs)
        object.__setattr__(self, "jobs", jobs)
        if self.machines_number <= 0:
            raise ValidationError(f"machines_number must be positive: {self.machines_number}")
        if not jobs:
            raise ValidationError("Problem has no jobs")
        for job_id, job in enumerate(jobs, start=1):
            if not job:
                raise ValidationError(f"Job {job_id} has no tasks")
            for task_index, (machine, duration) in enumerate(job, start=1):
                if not (0 <= machine < self.machines_number):
                    raise ValidationError(
                        f"Task ({job_id}, {task_index}) references machine {machine} "
                        f"outside [0, {self.machines_number})"
                    )
                if duration < 0:
                    raise ValidationError(
                        f"Task ({job_id}, {task_index}) has negative duration {duration}"
                    )

    @property
    def jobs_number(self) -> int:
        return len(self.jobs)

    @property
    def total_operations(self) -> int:
        """Sum of task counts over all jobs (= genome length)."""
        return sum(len(job) for job in self.jobs)

    def job_tasks(self, job_id: int) -> tuple[Task, ...]:
        return self.jobs[job_id - 1]

    def task(self, operation: OperationKey) -> Task:
        job_id, task_index = operation
        return self.jobs[job_id - 1][task_index - 1]


@dataclass(frozen=True)
class GenomeFitness:
    """Genome tied to its fitness (makespan, lower is better)."""

    genome: Genome
    fitness: int


@dataclass(frozen=True)
class ScheduleOperationRow:
    """Single scheduled operation with timing and identification data.

    Fields:
        start: Tick at which the operation was dispatched.
        end: Completion time (start + duration).
        job: Job identifier (1-based).
        task_index: Position of the task inside its job (1-based).
        machine: Machine on which the operation is processed.
        duration: Duration of the operation.
    """

    start: int
    end: int
    job: int
    task_index: int
    machine: int
    duration: int


@dataclass(frozen=True)
class Schedule:
    """Full schedule plus objective value (cmax).

    Fields:
        operations: Scheduled operations in completion order.
        cmax: Makespan reported by the simulator.
    """

    operations: list[ScheduleOperationRow]
    cmax: int
