"""Multi-run aggregation over independently seeded sessions.

Every run ``i`` derives its own seed from the base seed, so any single run can
be replayed from ``(base_seed, i)`` without touching the others.  The first
``display_cap`` runs keep their full trajectory; later runs only contribute to
the mean line and to a summary-only tail rollup.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..core.catalog import SEED_STEP
from ..core.config import load_limits
from ..core.engine_core import run_simulation
from ..core.models import ConfigurationError, SimulationLine, SimulationSettings, SimulationSummary
from ..core.rng import create_seeded_random

__all__ = [
    "BatchResult",
    "DisplayRun",
    "TailSummary",
    "calculate_mean_line",
    "run_batch",
    "seed_for_index",
]

logger = logging.getLogger(__name__)

_MASK32 = 0xFFFFFFFF


def seed_for_index(base_seed: int, index: int) -> int:
    return (int(base_seed) + int(index) * SEED_STEP) & _MASK32


def _rate(count: int, denominator: int) -> float:
    if denominator <= 0:
        return 0.0
    return 100.0 * count / denominator


@dataclass(frozen=True)
class DisplayRun:
    """A run kept with its full trajectory for per-run display."""

    index: int
    seed: int
    line: SimulationLine

    @property
    def id(self) -> str:
        return f"run-{self.index + 1}"

    @property
    def name(self) -> str:
        return f"Run {self.index + 1}"

    @property
    def points(self) -> tuple[float, ...]:
        return self.line.points

    @property
    def summary(self) -> SimulationSummary:
        return self.line.summary

    @property
    def win_rate(self) -> float:
        return self.summary.win_rate()

    @property
    def loss_rate(self) -> float:
        return self.summary.loss_rate()


@dataclass(frozen=True)
class TailSummary:
    """Rollup of the runs beyond the display cap; rates are spins-weighted percentages."""

    count: int
    total_final: float
    win_spins: int
    loss_spins: int
    win_rate: float
    loss_rate: float


@dataclass(frozen=True)
class BatchResult:
    settings: SimulationSettings
    base_seed: int
    total_runs: int
    display_runs: tuple[DisplayRun, ...]
    mean_points: tuple[float, ...]
    tail: TailSummary | None
    total_final_net: float


def run_batch(
    settings: SimulationSettings,
    run_count: int,
    base_seed: int,
    display_cap: int | None = None,
) -> BatchResult:
    """Run ``run_count`` seeded sessions and fold them into a :class:`BatchResult`.

    ``run_count`` is clamped to at least one.  ``display_cap`` defaults to the
    configured limit (100 unless ``BANKROLLSIM_DISPLAY_CAP`` says otherwise).
    """

    cap = load_limits().display_cap if display_cap is None else int(display_cap)
    if cap < 0:
        raise ConfigurationError(f"display_cap must be non-negative; got {cap}")
    total_runs = max(int(run_count), 1)
    spins = settings.spins

    logger.debug(
        "Starting batch",
        extra={"runs": total_runs, "spins": spins, "base_seed": base_seed, "display_cap": cap},
    )

    accumulator = np.zeros(spins + 1, dtype=np.float64)
    display_runs: list[DisplayRun] = []
    total_final_net = 0.0
    tail_count = 0
    tail_final = 0.0
    tail_win_spins = 0
    tail_loss_spins = 0

    for index in range(total_runs):
        seed = seed_for_index(base_seed, index)
        line = run_simulation(settings, create_seeded_random(seed))
        accumulator += np.asarray(line.points, dtype=np.float64)

        summary = line.summary
        if index < cap:
            display_runs.append(DisplayRun(index=index, seed=seed, line=line))
        else:
            tail_count += 1
            tail_final += summary.final_net
            tail_win_spins += summary.total_win_spins
            tail_loss_spins += summary.total_losing_spins
        total_final_net += summary.final_net

    mean_points = tuple((accumulator / total_runs).tolist())

    tail: TailSummary | None = None
    if tail_count > 0:
        tail_spins = tail_count * spins
        tail = TailSummary(
            count=tail_count,
            total_final=tail_final,
            win_spins=tail_win_spins,
            loss_spins=tail_loss_spins,
            win_rate=_rate(tail_win_spins, tail_spins),
            loss_rate=_rate(tail_loss_spins, tail_spins),
        )

    logger.debug(
        "Finished batch",
        extra={"runs": total_runs, "displayed": len(display_runs), "total_final_net": total_final_net},
    )
    return BatchResult(
        settings=settings,
        base_seed=int(base_seed),
        total_runs=total_runs,
        display_runs=tuple(display_runs),
        mean_points=mean_points,
        tail=tail,
        total_final_net=total_final_net,
    )


def calculate_mean_line(lines: Sequence[SimulationLine]) -> list[float]:
    """Per-index mean over trajectories of possibly different lengths.

    Each index averages only the lines long enough to reach it.
    """

    if not lines:
        return []
    longest = max(len(line.points) for line in lines)
    mean_points: list[float] = []
    for idx in range(longest):
        total = 0.0
        count = 0
        for line in lines:
            if idx < len(line.points):
                total += line.points[idx]
                count += 1
        mean_points.append(total / count if count else 0.0)
    return mean_points
