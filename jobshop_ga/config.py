"""Run configuration: YAML/JSON loading and GA parameter extraction.

Example ``run.yaml``::

    instance: dataset          # built-in name or instance file path
    seed: 42                   # omit for a non-reproducible run
    runs: 1                    # >1 switches main.py to auto mode
    log_level: INFO
    ga:
      population_size: 50
      generations: 50
      selection_margin: 0.7
      mutation_probability: 0.1111
      pairing: growing         # growing | fixed
    output:
      csv: results/progress.csv
      charts_dir: charts
"""

from __future__ import annotations

import json
import os
from typing import Any, Dict

import yaml

from .algorithms.base import GAParams
from .errors import ValidationError


def load_config(config_file: str) -> Dict[str, Any]:
    """Load configuration from a YAML or JSON file."""
    if not os.path.isfile(config_file):
        raise FileNotFoundError(f"Config file not found: {config_file}")
    with open(config_file, "r", encoding="utf-8") as f:
        text = f.read()
    if config_file.endswith((".yml", ".yaml")):
        cfg = yaml.safe_load(text) or {}
    else:
        cfg = json.loads(text)
    if not isinstance(cfg, dict):
        raise ValidationError(f"{config_file}: top level must be a mapping")
    return cfg


def params_from_config(cfg: Dict[str, Any]) -> GAParams:
    """Build :class:`GAParams` from the ``ga`` section, defaults for gaps."""
    ga_cfg = cfg.get("ga", {}) if isinstance(cfg.get("ga"), dict) else {}
    defaults = GAParams()
    try:
        return GAParams(
            population_size=int(ga_cfg.get("population_size", defaults.population_size)),
            generations=int(ga_cfg.get("generations", defaults.generations)),
            selection_margin=float(ga_cfg.get("selection_margin", defaults.selection_margin)),
            mutation_probability=float(
                ga_cfg.get("mutation_probability", defaults.mutation_probability)
            ),
            pairing=str(ga_cfg.get("pairing", defaults.pairing)),
        )
    except ValidationError:
        raise
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid 'ga' section: {e}") from e
