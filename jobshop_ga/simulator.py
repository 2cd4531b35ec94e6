from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from .models import OperationKey, ProblemModel, Schedule, ScheduleOperationRow
from .operations import decode_genome


@dataclass
class MachineState:
    """Transient state of one machine during a single simulation."""

    queue: deque[OperationKey] = field(default_factory=deque)
    current: Optional[OperationKey] = None
    time_remaining: int = 0
    started_at: int = 0
    completed: set[OperationKey] = field(default_factory=set)

    def is_idle(self) -> bool:
        return self.current is None and self.time_remaining == 0

    def is_done(self) -> bool:
        return not self.queue and self.is_idle()


def _predecessor_completed(operation: OperationKey, machines: list[MachineState]) -> bool:
    job_id, task_index = operation
    if task_index == 1:
        return True
    predecessor = (job_id, task_index - 1)
    return any(predecessor in m.completed for m in machines)


def simulate_operations(
    problem: ProblemModel,
    operations: Sequence[OperationKey],
) -> Schedule:
    """Run the tick-based machine simulation over decoded operations.

    Every operation goes to the FIFO queue of the machine its task needs,
    in the given order. Each tick: stop when all machines are done; let
    every idle machine start its queue head if the head is a first task or
    its job predecessor already completed somewhere; then count down one
    time unit on busy machines, completing operations that reach zero. A
    zero-duration task completes in the tick it was dispatched.

    Args:
        problem: Problem data (jobs with (machine, duration) tuples).
        operations: Output of :func:`jobshop_ga.operations.decode_genome`.

    Returns:
        Schedule: operations with start and end ticks plus the makespan.
    """
    machines = [MachineState() for _ in range(problem.machines_number)]
    for op in operations:
        machine, _ = problem.task(op)
        machines[machine].queue.append(op)

    rows: list[ScheduleOperationRow] = []
    time = 0
    while True:
        if all(m.is_done() for m in machines):
            return Schedule(operations=rows, cmax=time)

        # Dispatch only reads completed sets, which this phase never changes.
        for m in machines:
            if m.queue and m.is_idle() and _predecessor_completed(m.queue[0], machines):
                m.current = m.queue.popleft()
                _, m.time_remaining = problem.task(m.current)
                m.started_at = time

        for index, m in enumerate(machines):
            if m.current is None:
                continue
            if m.time_remaining > 0:
                m.time_remaining -= 1
            if m.time_remaining == 0:
                job_id, task_index = m.current
                _, duration = problem.task(m.current)
                rows.append(
                    ScheduleOperationRow(
                        start=m.started_at,
                        end=m.started_at + duration,
                        job=job_id,
                        task_index=task_index,
                        machine=index,
                        duration=duration,
                    )
                )
                m.completed.add(m.current)
                m.current = None

        time += 1


def build_schedule_from_genome(
    problem: ProblemModel,
    genome: Iterable[int],
) -> Schedule:
    """Decode a genome and simulate it.

    Raises:
        InvalidGenomeError: If the genome's occurrence counts are wrong.
    """
    return simulate_operations(problem, decode_genome(problem, genome))


def simulate(problem: ProblemModel, genome: Iterable[int]) -> int:
    """Return the makespan of ``genome`` on ``problem``."""
    return build_schedule_from_genome(problem, genome).cmax


def machine_workload_bound(problem: ProblemModel) -> int:
    """Largest total duration assigned to a single machine.

    No schedule can finish before its busiest machine has processed all of
    its tasks, so this is a lower bound on any makespan.
    """
    load = [0] * problem.machines_number
    for job in problem.jobs:
        for machine, duration in job:
            load[machine] += duration
    return max(load)


def machine_overlaps(
    schedule: Schedule,
) -> list[tuple[ScheduleOperationRow, ScheduleOperationRow]]:
    """Pairs of consecutive operations on one machine that overlap in time.

    An empty list means every machine processed one operation at a time.
    """
    ordered = sorted(schedule.operations, key=lambda r: (r.machine, r.start, r.end))
    return [
        (prev, row)
        for prev, row in zip(ordered, ordered[1:])
        if prev.machine == row.machine and row.start < prev.end
    ]
