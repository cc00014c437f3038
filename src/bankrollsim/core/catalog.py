"""Static payout catalogs for the slot profiles and roulette bets.

Tables are authored with rare, high-paying outcomes last and are used exactly
as written.  The probabilities are not normalised, so a floating-point running
sum that lands a hair under one is covered by the sampler's last-outcome
fallback.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from .distribution import Outcome
from .models import ConfigurationError, SimulationSettings, SlotSettings

__all__ = [
    "BASELINE_SEED",
    "DEFAULT_SETTINGS",
    "MAX_RUNS",
    "ROULETTE_BETS",
    "RouletteBetDefinition",
    "SEED_STEP",
    "SLOT_PROFILES",
    "SLOT_PROFILE_LABELS",
    "SPIN_PRESETS",
    "roulette_bet",
    "slot_outcomes",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RouletteBetDefinition:
    probability: float
    multiplier: float
    label: str


SLOT_PROFILES: Final[Mapping[str, tuple[Outcome, ...]]] = MappingProxyType(
    {
        "steady": (
            Outcome(0.336, 0),
            Outcome(0.25, 0.5),
            Outcome(0.2, 1),
            Outcome(0.1, 1.5),
            Outcome(0.07, 2),
            Outcome(0.032, 5),
            Outcome(0.011, 10),
            Outcome(0.001, 20),
        ),
        "balanced": (
            Outcome(0.5937, 0),
            Outcome(0.1, 0.5),
            Outcome(0.15, 1),
            Outcome(0.09, 2),
            Outcome(0.049, 5),
            Outcome(0.015, 10),
            Outcome(0.002, 50),
            Outcome(0.0003, 100),
        ),
        "volatile": (
            Outcome(0.769425, 0),
            Outcome(0.1, 0.5),
            Outcome(0.05, 1),
            Outcome(0.04, 2),
            Outcome(0.02, 5),
            Outcome(0.015, 10),
            Outcome(0.003, 50),
            Outcome(0.0025, 100),
            Outcome(0.000075, 1000),
        ),
    }
)

SLOT_PROFILE_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "steady": "Steady (low volatility)",
        "balanced": "Balanced (casino default)",
        "volatile": "Volatile (high variance)",
    }
)

# Single-zero wheel: 37 pockets.
ROULETTE_BETS: Final[Mapping[str, RouletteBetDefinition]] = MappingProxyType(
    {
        "single-number": RouletteBetDefinition(1 / 37, 36, "Single Number (35:1)"),
        "split": RouletteBetDefinition(2 / 37, 18, "Split (17:1)"),
        "street": RouletteBetDefinition(3 / 37, 12, "Street (11:1)"),
        "dozen": RouletteBetDefinition(12 / 37, 3, "Dozen (2:1)"),
        "even-money": RouletteBetDefinition(18 / 37, 2, "Red / Black (1:1)"),
    }
)

DEFAULT_SETTINGS: Final[SimulationSettings] = SlotSettings(spins=200, bet_size=1.0, profile="balanced")

BASELINE_SEED: Final = 9645231
SEED_STEP: Final = 9973
MAX_RUNS: Final = 1000
SPIN_PRESETS: Final[tuple[int, ...]] = (1, 5, 10, 20, 50, 100, 250, 500, 1000)


def slot_outcomes(profile: str) -> tuple[Outcome, ...]:
    try:
        return SLOT_PROFILES[profile]
    except KeyError:
        logger.warning("Unknown slot profile requested: %s", profile)
        raise ConfigurationError(
            f"Unknown slot profile '{profile}'. Options: {', '.join(SLOT_PROFILES)}"
        ) from None


def roulette_bet(bet: str) -> RouletteBetDefinition:
    try:
        return ROULETTE_BETS[bet]
    except KeyError:
        logger.warning("Unknown roulette bet requested: %s", bet)
        raise ConfigurationError(f"Unknown roulette bet '{bet}'. Options: {', '.join(ROULETTE_BETS)}") from None
