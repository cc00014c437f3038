from __future__ import annotations

import sys as _sys

# pydantic evaluates ``X | None`` annotations at runtime.
if _sys.version_info[:2] < (3, 10):
    raise RuntimeError(f"bankrollsim requires Python 3.10 or newer; detected {_sys.version.split()[0]}")

__version__ = "0.1.0"

from .analysis.batch import BatchResult, DisplayRun, TailSummary, calculate_mean_line, run_batch, seed_for_index
from .core.catalog import (
    BASELINE_SEED,
    DEFAULT_SETTINGS,
    MAX_RUNS,
    ROULETTE_BETS,
    SLOT_PROFILE_LABELS,
    SLOT_PROFILES,
)
from .core.engine_core import run_simulation
from .core.models import (
    ConfigurationError,
    RouletteSettings,
    SimulationLine,
    SimulationSettings,
    SimulationSummary,
    SlotSettings,
)
from .core.rng import create_seeded_random, random_seed

__all__ = [
    "__version__",
    "BASELINE_SEED",
    "BatchResult",
    "ConfigurationError",
    "DEFAULT_SETTINGS",
    "DisplayRun",
    "MAX_RUNS",
    "ROULETTE_BETS",
    "RouletteSettings",
    "SLOT_PROFILES",
    "SLOT_PROFILE_LABELS",
    "SimulationLine",
    "SimulationSettings",
    "SimulationSummary",
    "SlotSettings",
    "TailSummary",
    "calculate_mean_line",
    "create_seeded_random",
    "random_seed",
    "run_batch",
    "run_simulation",
    "seed_for_index",
]
