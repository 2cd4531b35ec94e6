"""Instance loading: plain-text job-shop files, YAML/JSON files, built-ins.

Text format (JSPLIB style)::

    # optional comments
    <jobs> <machines>
    <machine> <duration> <machine> <duration> ...   # one line per job

Jobs may have different task counts. Machine indices are 0-based; files
written 1-based (no machine 0 and the largest index equal to the machine
count) are shifted down.
"""

from __future__ import annotations

import json
import os
from typing import Any

import yaml

from .errors import ValidationError
from .instances import BUILTIN_INSTANCES
from .models import ProblemModel


def _ints(line: str, path: str, line_no: int) -> list[int]:
    try:
        return [int(tok) for tok in line.split()]
    except ValueError as e:
        raise ValidationError(f"{path}:{line_no}: non-integer token") from e


def parse_instance_text(path: str) -> ProblemModel:
    with open(path, "r", encoding="utf-8") as f:
        lines = [
            (no, line.split("#", 1)[0].strip()) for no, line in enumerate(f, start=1)
        ]
    lines = [(no, line) for no, line in lines if line]
    if not lines:
        raise ValidationError(f"{path}: empty instance file")

    header_no, header = lines[0]
    header_vals = _ints(header, path, header_no)
    if len(header_vals) != 2:
        raise ValidationError(f"{path}:{header_no}: header must be '<jobs> <machines>'")
    jobs_number, machines_number = header_vals

    body = lines[1:]
    if len(body) < jobs_number:
        raise ValidationError(
            f"{path}: header declares {jobs_number} jobs, found {len(body)} job lines"
        )
    raw_jobs: list[list[tuple[int, int]]] = []
    for no, line in body[:jobs_number]:
        vals = _ints(line, path, no)
        if not vals or len(vals) % 2:
            raise ValidationError(f"{path}:{no}: expected '<machine> <duration>' pairs")
        raw_jobs.append([(vals[k], vals[k + 1]) for k in range(0, len(vals), 2)])

    machines_used = {m for job in raw_jobs for m, _ in job}
    if machines_used and 0 not in machines_used and max(machines_used) == machines_number:
        raw_jobs = [[(m - 1, d) for m, d in job] for job in raw_jobs]

    return ProblemModel(jobs=raw_jobs, machines_number=machines_number)


def problem_from_mapping(data: Any, source: str = "<mapping>") -> ProblemModel:
    """Build a problem from ``{"machines": M, "jobs": [[[m, d], ...], ...]}``."""
    if not isinstance(data, dict) or "jobs" not in data or "machines" not in data:
        raise ValidationError(f"{source}: expected keys 'machines' and 'jobs'")
    try:
        jobs = [[(int(m), int(d)) for m, d in job] for job in data["jobs"]]
        machines_number = int(data["machines"])
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{source}: malformed jobs/machines: {e}") from e
    return ProblemModel(jobs=jobs, machines_number=machines_number)


def load_instance(source: str) -> ProblemModel:
    """Load an instance by built-in name or file path.

    ``.yaml``/``.yml``/``.json`` files are read as mappings, anything else
    as the text format.

    Raises:
        ValidationError: On malformed content.
        FileNotFoundError: If ``source`` is neither a built-in nor a file.
    """
    if source in BUILTIN_INSTANCES:
        return BUILTIN_INSTANCES[source]
    if not os.path.isfile(source):
        raise FileNotFoundError(f"Instance not found: {source}")
    if source.endswith((".yml", ".yaml")):
        with open(source, "r", encoding="utf-8") as f:
            return problem_from_mapping(yaml.safe_load(f), source)
    if source.endswith(".json"):
        with open(source, "r", encoding="utf-8") as f:
            return problem_from_mapping(json.load(f), source)
    return parse_instance_text(source)
