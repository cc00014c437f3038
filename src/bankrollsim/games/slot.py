"""Multi-tier slot machine: one payout table per volatility profile."""

from __future__ import annotations

from ..core.catalog import slot_outcomes
from ..core.distribution import draw_multiplier
from ..core.models import SimulationLine, SlotSettings
from ..core.rng import RandomSource
from .walk import BankrollWalk

__all__ = ["simulate_slot"]


def simulate_slot(settings: SlotSettings, rand: RandomSource) -> SimulationLine:
    outcomes = slot_outcomes(settings.profile)
    bet_size = settings.bet_size
    walk = BankrollWalk()
    for _ in range(settings.spins):
        multiplier = draw_multiplier(outcomes, rand)
        change = bet_size * multiplier - bet_size
        # Breakeven (multiplier 1) lands in the losing bucket.
        walk.record(change, won=change > 0)
    return walk.finish()
