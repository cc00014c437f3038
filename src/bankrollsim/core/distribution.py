"""Discrete payout distributions and the cumulative-walk sampler."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .rng import RandomSource

__all__ = [
    "Outcome",
    "draw_multiplier",
    "expected_multiplier",
    "sample_multiplier",
    "total_probability",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """One row of a payout table: the chance of landing it and its multiplier."""

    probability: float
    multiplier: float


def sample_multiplier(outcomes: Sequence[Outcome], draw: float) -> float:
    """Resolve ``draw`` against ``outcomes`` in declaration order.

    The first outcome whose running cumulative probability reaches ``draw``
    wins.  Tables are used exactly as authored (never normalised), so a draw
    beyond the table's total mass falls back to the last outcome.
    """

    if not outcomes:
        return 0.0
    cumulative = 0.0
    for outcome in outcomes:
        cumulative += outcome.probability
        if draw <= cumulative:
            return outcome.multiplier
    logger.debug("Draw %.6f exceeded cumulative mass %.6f; using last outcome.", draw, cumulative)
    return outcomes[-1].multiplier


def draw_multiplier(outcomes: Sequence[Outcome], rand: RandomSource) -> float:
    return sample_multiplier(outcomes, rand())


def total_probability(outcomes: Sequence[Outcome]) -> float:
    total = 0.0
    for outcome in outcomes:
        total += outcome.probability
    return total


def expected_multiplier(outcomes: Sequence[Outcome]) -> float:
    """Return the probability-weighted multiplier (return-to-player per unit staked)."""

    return sum(outcome.probability * outcome.multiplier for outcome in outcomes)
