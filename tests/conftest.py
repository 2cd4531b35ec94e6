"""Pytest configuration, shared problem fixtures & custom summary hook.

Also ensures the project root is on sys.path so 'jobshop_ga' and 'main'
import without installing the package.
"""

from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest

_root = Path(__file__).resolve().parents[1]
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

from jobshop_ga.instances import DATASET, EXAMPLE  # noqa: E402
from jobshop_ga.models import ProblemModel  # noqa: E402


class ScriptedRandom:
    """Stand-in generator replaying fixed ``randrange``/``random`` values."""

    def __init__(self, randrange_values=(), random_values=()):
        self._randrange = list(randrange_values)
        self._random = list(random_values)

    def randrange(self, stop: int) -> int:
        value = self._randrange.pop(0)
        assert 0 <= value < stop, f"scripted value {value} outside [0, {stop})"
        return value

    def random(self) -> float:
        return self._random.pop(0)


@pytest.fixture
def example_problem() -> ProblemModel:
    return EXAMPLE


@pytest.fixture
def dataset_problem() -> ProblemModel:
    return DATASET


@pytest.fixture
def single_task_problem() -> ProblemModel:
    return ProblemModel(jobs=[[(0, 5)]], machines_number=1)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


def pytest_terminal_summary(
    terminalreporter: pytest.TerminalReporter,
    exitstatus: int,
    config: pytest.Config,
) -> None:  # noqa: D401
    """Append a one-line summary at the end of the test session."""
    stats = terminalreporter.stats
    counts = {
        key: len(stats.get(key, [])) for key in ("passed", "failed", "error", "skipped")
    }
    terminalreporter.section("Custom summary", sep="=")
    terminalreporter.write_line(" | ".join(f"{k}: {v}" for k, v in counts.items()))
    for rep in stats.get("failed", []):
        terminalreporter.write_line(f"  - {rep.nodeid}")
