from __future__ import annotations

from ..games import simulate_roulette, simulate_slot
from .models import ConfigurationError, RouletteSettings, SimulationLine, SimulationSettings, SlotSettings
from .rng import Mulberry32, RandomSource, random_seed

__all__ = ["run_simulation"]


def run_simulation(settings: SimulationSettings, rand: RandomSource | None = None) -> SimulationLine:
    """Play one session of ``settings.spins`` spins and summarise it.

    ``rand`` must yield floats in ``[0, 1)``.  When omitted, a generator seeded
    from the OS entropy pool is used, so the result is not reproducible; batch
    callers always pass a seeded source.
    """

    source = rand if rand is not None else Mulberry32(random_seed())
    if isinstance(settings, SlotSettings):
        return simulate_slot(settings, source)
    if isinstance(settings, RouletteSettings):
        return simulate_roulette(settings, source)
    raise ConfigurationError(f"Unsupported machine settings: {type(settings).__name__}")
