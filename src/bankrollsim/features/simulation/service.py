from __future__ import annotations

import logging
from dataclasses import dataclass

from ...analysis.batch import BatchResult, DisplayRun, run_batch
from ...core.catalog import (
    BASELINE_SEED,
    DEFAULT_SETTINGS,
    ROULETTE_BETS,
    SLOT_PROFILE_LABELS,
    SLOT_PROFILES,
    SPIN_PRESETS,
)
from ...core.config import load_limits
from ...core.distribution import expected_multiplier, total_probability
from ...core.engine_core import run_simulation
from ...core.models import (
    ConfigurationError,
    RouletteSettings,
    SimulationSettings,
    SimulationSummary,
    SlotSettings,
)
from ...core.rng import create_seeded_random, random_seed
from .concurrency import run_blocking
from .schemas import (
    BatchPayload,
    CatalogPayload,
    DisplayRunPayload,
    LimitsPayload,
    LinePayload,
    OutcomePayload,
    RouletteBetPayload,
    SettingsPayload,
    SlotProfilePayload,
    SummaryPayload,
    TailPayload,
)

__all__ = ["SimulationConfig", "SimulationService", "build_settings"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Caller-facing request for one session or a batch of sessions."""

    machine: str = "slot"
    spins: int = DEFAULT_SETTINGS.spins
    bet_size: float = DEFAULT_SETTINGS.bet_size
    profile: str | None = None
    bet: str | None = None
    runs: int = 1
    seed: int | None = None


def build_settings(config: SimulationConfig) -> SimulationSettings:
    machine = (config.machine or "").strip().lower()
    if machine == "slot":
        return SlotSettings(spins=config.spins, bet_size=config.bet_size, profile=config.profile or "balanced")
    if machine == "roulette":
        return RouletteSettings(spins=config.spins, bet_size=config.bet_size, bet=config.bet or "even-money")
    raise ConfigurationError(f"Unknown machine '{config.machine}'. Options: slot, roulette")


class SimulationService:
    """Stateless facade translating requests into engine calls and payloads."""

    def catalog(self) -> CatalogPayload:
        limits = load_limits()
        return CatalogPayload(
            slot_profiles=[
                SlotProfilePayload(
                    id=key,
                    label=SLOT_PROFILE_LABELS[key],
                    outcomes=[OutcomePayload(probability=o.probability, multiplier=o.multiplier) for o in outcomes],
                    total_probability=total_probability(outcomes),
                    expected_return=expected_multiplier(outcomes),
                )
                for key, outcomes in SLOT_PROFILES.items()
            ],
            roulette_bets=[
                RouletteBetPayload(id=key, label=bet.label, probability=bet.probability, multiplier=bet.multiplier)
                for key, bet in ROULETTE_BETS.items()
            ],
            default_settings=_settings_payload(DEFAULT_SETTINGS),
            baseline_seed=BASELINE_SEED,
            spin_presets=list(SPIN_PRESETS),
            limits=LimitsPayload(
                display_cap=limits.display_cap,
                max_runs=limits.max_runs,
                max_spins=limits.max_spins,
            ),
        )

    def run(self, config: SimulationConfig) -> LinePayload:
        settings = build_settings(config)
        seed = config.seed if config.seed is not None else random_seed()
        line = run_simulation(settings, create_seeded_random(seed))
        return LinePayload(
            seed=seed,
            settings=_settings_payload(settings),
            points=list(line.points),
            summary=_summary_payload(line.summary),
        )

    async def run_async(self, config: SimulationConfig) -> LinePayload:
        return await run_blocking(self.run, config)

    def batch(self, config: SimulationConfig, *, display_cap: int | None = None) -> BatchPayload:
        settings = build_settings(config)
        base_seed = config.seed if config.seed is not None else BASELINE_SEED
        result = run_batch(settings, config.runs, base_seed, display_cap=display_cap)
        logger.debug("Batch served", extra={"runs": result.total_runs, "base_seed": base_seed})
        return _batch_payload(result)

    async def batch_async(self, config: SimulationConfig, *, display_cap: int | None = None) -> BatchPayload:
        return await run_blocking(self.batch, config, display_cap=display_cap)


def _settings_payload(settings: SimulationSettings) -> SettingsPayload:
    if isinstance(settings, SlotSettings):
        return SettingsPayload(
            machine=settings.machine, spins=settings.spins, bet_size=settings.bet_size, profile=settings.profile
        )
    return SettingsPayload(machine=settings.machine, spins=settings.spins, bet_size=settings.bet_size, bet=settings.bet)


def _summary_payload(summary: SimulationSummary) -> SummaryPayload:
    return SummaryPayload(
        total_win_spins=summary.total_win_spins,
        total_losing_spins=summary.total_losing_spins,
        final_net=summary.final_net,
        peak=summary.peak,
        trough=summary.trough,
        volatility=summary.volatility,
    )


def _display_run_payload(run: DisplayRun) -> DisplayRunPayload:
    return DisplayRunPayload(
        id=run.id,
        name=run.name,
        index=run.index,
        seed=run.seed,
        points=list(run.points),
        summary=_summary_payload(run.summary),
        win_rate=run.win_rate,
        loss_rate=run.loss_rate,
    )


def _batch_payload(result: BatchResult) -> BatchPayload:
    tail = None
    if result.tail is not None:
        tail = TailPayload(
            count=result.tail.count,
            total_final=result.tail.total_final,
            win_rate=result.tail.win_rate,
            loss_rate=result.tail.loss_rate,
        )
    return BatchPayload(
        settings=_settings_payload(result.settings),
        base_seed=result.base_seed,
        total_runs=result.total_runs,
        runs=[_display_run_payload(run) for run in result.display_runs],
        mean_points=list(result.mean_points),
        tail=tail,
        total_final_net=result.total_final_net,
    )
