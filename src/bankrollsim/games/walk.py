from __future__ import annotations

import math

from ..core.models import SimulationLine, SimulationSummary

__all__ = ["BankrollWalk", "population_std"]


def population_std(points: list[float]) -> float:
    if not points:
        return 0.0
    count = len(points)
    mean = sum(points) / count
    variance = sum((value - mean) ** 2 for value in points) / count
    return math.sqrt(variance)


class BankrollWalk:
    """Accumulates per-spin net changes into a cumulative trajectory.

    ``peak`` and ``trough`` start at zero, so a session that never goes above
    (or below) its starting bankroll reports 0 for that side.
    """

    __slots__ = ("net", "peak", "trough", "win_spins", "losing_spins", "points")

    def __init__(self) -> None:
        self.net = 0.0
        self.peak = 0.0
        self.trough = 0.0
        self.win_spins = 0
        self.losing_spins = 0
        self.points: list[float] = [0.0]

    def record(self, change: float, *, won: bool) -> None:
        if won:
            self.win_spins += 1
        else:
            self.losing_spins += 1
        self.net += change
        if self.net > self.peak:
            self.peak = self.net
        if self.net < self.trough:
            self.trough = self.net
        self.points.append(self.net)

    def finish(self) -> SimulationLine:
        summary = SimulationSummary(
            total_win_spins=self.win_spins,
            total_losing_spins=self.losing_spins,
            final_net=self.points[-1],
            peak=self.peak,
            trough=self.trough,
            volatility=population_std(self.points),
        )
        return SimulationLine(points=tuple(self.points), summary=summary)
