"""Single-zero roulette with one fixed bet per session."""

from __future__ import annotations

from ..core.catalog import roulette_bet
from ..core.models import RouletteSettings, SimulationLine
from ..core.rng import RandomSource
from .walk import BankrollWalk

__all__ = ["simulate_roulette"]


def simulate_roulette(settings: RouletteSettings, rand: RandomSource) -> SimulationLine:
    definition = roulette_bet(settings.bet)
    bet_size = settings.bet_size
    win_change = bet_size * (definition.multiplier - 1)
    walk = BankrollWalk()
    for _ in range(settings.spins):
        won = rand() <= definition.probability
        walk.record(win_change if won else -bet_size, won=won)
    return walk.finish()
