"""Auto mode execution logic.

Runs the GA ``runs`` times, each run with its own generator seeded from
the caller's generator, so the whole batch is reproducible from one seed.
Per-run results and the best genome are persisted as JSON while the best
schedule is rendered to a Gantt chart.
"""
from __future__ import annotations

import json
import logging
import os
import random
from datetime import datetime
from typing import Any, Dict, List, Optional

from jobshop_ga.algorithms.base import GAParams
from jobshop_ga.evaluation import CacheType, evaluate
from jobshop_ga.models import GenomeFitness, ProblemModel
from jobshop_ga.operations import decode_genome
from jobshop_ga.visualization import plot_gantt, plot_generation_progress
from .common import run_ga

logger = logging.getLogger("jssp.auto")


def run_auto(
    instance: ProblemModel,
    instance_path: str,
    runs: int,
    params: GAParams,
    rng: random.Random,
    charts_dir: str,
) -> Optional[GenomeFitness]:
    """Run independent GA runs and persist a summary.

    Args:
        instance: Problem instance.
        instance_path: Instance name or path (stored in the JSON output).
        runs: Number of independent runs.
        params: GA hyper-parameters shared by all runs.
        rng: Generator the per-run seeds are drawn from.
        charts_dir: Directory for output artefacts (created if missing).

    Returns:
        Best member across all runs, or None when ``runs == 0``.
    """
    os.makedirs(charts_dir, exist_ok=True)
    cache: CacheType = {}
    per_run: List[Dict[str, Any]] = []
    best: Optional[GenomeFitness] = None
    best_history = None
    for i in range(1, runs + 1):
        seed = rng.randrange(2**32)
        member, history, elapsed = run_ga(instance, params, random.Random(seed), cache=cache)
        per_run.append(
            {
                "run": i,
                "seed": seed,
                "cmax": member.fitness,
                "time": elapsed,
                "final_mean": history[-1].mean if history else None,
            }
        )
        if best is None or member.fitness < best.fitness:
            best = member
            best_history = history
        if i % max(1, runs // 10) == 0:
            logger.info("Progress %d/%d: best=%s", i, runs, best.fitness)

    if best is None:
        return None

    cmax_values = [r["cmax"] for r in per_run]
    time_values = [r["time"] for r in per_run]
    logger.info(
        "Auto summary: best=%d avg=%.2f (%.4fs avg)",
        best.fitness,
        sum(cmax_values) / len(cmax_values),
        sum(time_values) / len(time_values),
    )
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    try:
        results_path = os.path.join(charts_dir, f"auto_results_{stamp}.json")
        json_payload = {
            "instance": instance_path,
            "runs": runs,
            "timestamp": stamp,
            "params": {
                "population_size": params.population_size,
                "generations": params.generations,
                "selection_margin": params.selection_margin,
                "mutation_probability": params.mutation_probability,
                "pairing": params.pairing,
            },
            "per_run": per_run,
            "best": {
                "cmax": best.fitness,
                "genome": list(best.genome),
                "operations": [list(op) for op in decode_genome(instance, best.genome)],
            },
            "averages": {
                "avg_cmax": sum(cmax_values) / len(cmax_values),
                "avg_time": sum(time_values) / len(time_values),
            },
        }
        with open(results_path, "w", encoding="utf-8") as f:
            json.dump(json_payload, f, ensure_ascii=False, indent=2)
        logger.info("Saved auto mode results JSON to %s", results_path)
    except OSError as e:
        logger.warning("Failed to write results JSON: %s", e)
    try:
        _, sched = evaluate(instance, best.genome, cache=cache, return_schedule=True)
        g_path = os.path.join(charts_dir, f"gantt_ga_c{sched.cmax}_{stamp}.png")
        plot_gantt(sched, save_path=g_path, algo_name="ga")
        logger.info("Saved Gantt chart to %s", g_path)
        if best_history:
            p_path = os.path.join(charts_dir, f"ga_progress_{stamp}.png")
            plot_generation_progress(best_history, save_path=p_path)
            logger.info("Saved progress chart to %s", p_path)
    except (OSError, ValueError) as e:
        logger.warning("Failed to create charts: %s", e)
    return best
