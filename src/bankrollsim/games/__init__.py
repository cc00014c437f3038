"""Game models that turn a draw stream into a bankroll trajectory."""

from .roulette import simulate_roulette
from .slot import simulate_slot
from .walk import BankrollWalk, population_std

__all__ = [
    "BankrollWalk",
    "population_std",
    "simulate_roulette",
    "simulate_slot",
]
