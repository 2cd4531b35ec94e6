#!/usr/bin/env python3
"""Job-shop GA entry point (config only).

Usage::

    python main.py --config config.yaml

Prints the CSV progress report (``Generation,Mean fitness,Best fitness``)
to stdout. With ``runs > 1`` the auto mode runs several seeded GA runs and
writes a JSON summary plus charts instead.
"""

import argparse
import logging
import os
import random
from datetime import datetime
from typing import IO, Any, Dict, List, Optional

from jobshop_ga.algorithms.base import GenerationStats
from jobshop_ga.config import load_config, params_from_config
from jobshop_ga.errors import JobShopError
from jobshop_ga.evaluation import evaluate
from jobshop_ga.modes.auto import run_auto
from jobshop_ga.modes.common import run_ga
from jobshop_ga.parser import load_instance
from jobshop_ga.report import REPORT_HEADER, format_generation, open_report_file
from jobshop_ga.visualization import plot_gantt, plot_generation_progress

logger = logging.getLogger("jssp.main")


def run_single(cfg: Dict[str, Any], out: Optional[IO[str]] = None) -> int:
    """Run one GA, streaming the report to ``out``. Returns the best cmax."""
    instance_path = cfg.get("instance", "dataset")
    instance = load_instance(instance_path)
    params = params_from_config(cfg)
    seed = cfg.get("seed")
    rng = random.Random(seed) if seed is not None else random.Random()
    output_cfg = cfg.get("output", {}) if isinstance(cfg.get("output"), dict) else {}
    logger.info(
        "Instance: %s jobs=%d machines=%d ops=%d seed=%s",
        instance_path,
        instance.jobs_number,
        instance.machines_number,
        instance.total_operations,
        seed,
    )

    cache: dict = {}
    with open_report_file(output_cfg.get("csv")) as report_file:

        def _emit(stats: GenerationStats) -> None:
            line = format_generation(stats)
            print(line, file=out)
            if report_file:
                report_file.write(line + "\n")

        print(REPORT_HEADER, file=out)
        best, history, elapsed = run_ga(instance, params, rng, cache=cache, on_generation=_emit)

    logger.info(
        "Best makespan %d after %d generations (%.3fs) genome=%s",
        best.fitness,
        len(history),
        elapsed,
        ",".join(map(str, best.genome)),
    )
    charts_dir = output_cfg.get("charts_dir")
    if charts_dir:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        _, sched = evaluate(instance, best.genome, cache=cache, return_schedule=True)
        g_path = plot_gantt(
            sched, save_path=os.path.join(charts_dir, f"gantt_ga_c{sched.cmax}_{stamp}.png")
        )
        logger.info("Saved Gantt chart to %s", g_path)
        if history:
            p_path = plot_generation_progress(
                history, save_path=os.path.join(charts_dir, f"ga_progress_{stamp}.png")
            )
            logger.info("Saved progress chart to %s", p_path)
    return best.fitness


def _run_auto_from_config(cfg: Dict[str, Any], runs: int) -> None:
    instance_path = cfg.get("instance", "dataset")
    seed = cfg.get("seed")
    output_cfg = cfg.get("output", {}) if isinstance(cfg.get("output"), dict) else {}
    best = run_auto(
        instance=load_instance(instance_path),
        instance_path=instance_path,
        runs=runs,
        params=params_from_config(cfg),
        rng=random.Random(seed) if seed is not None else random.Random(),
        charts_dir=output_cfg.get("charts_dir") or "charts",
    )
    if best is not None:
        print(f"Best makespan over {runs} runs: {best.fitness}")


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Job-shop genetic algorithm (config only)")
    parser.add_argument(
        "--config",
        default="config.yaml",
        help="Path to the YAML/JSON configuration file",
    )
    args = parser.parse_args(argv)
    cfg = load_config(args.config)

    log_level = cfg.get("log_level", "WARNING")
    logging.basicConfig(
        level=getattr(logging, str(log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    runs = int(cfg.get("runs", 1))
    try:
        if runs > 1:
            _run_auto_from_config(cfg, runs)
        else:
            run_single(cfg)
    except (JobShopError, OSError) as e:
        logger.error("Run aborted: %s", e)
        raise


if __name__ == "__main__":
    main()
