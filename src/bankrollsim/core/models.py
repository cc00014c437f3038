from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, Union

__all__ = [
    "ConfigurationError",
    "MachineType",
    "ROULETTE_BET_IDS",
    "RouletteBet",
    "RouletteSettings",
    "SLOT_PROFILE_IDS",
    "SimulationLine",
    "SimulationSettings",
    "SimulationSummary",
    "SlotProfile",
    "SlotSettings",
]

MachineType = Literal["slot", "roulette"]
SlotProfile = Literal["steady", "balanced", "volatile"]
RouletteBet = Literal["single-number", "split", "street", "dozen", "even-money"]

SLOT_PROFILE_IDS: Final[tuple[str, ...]] = ("steady", "balanced", "volatile")
ROULETTE_BET_IDS: Final[tuple[str, ...]] = ("single-number", "split", "street", "dozen", "even-money")


class ConfigurationError(ValueError):
    """Raised when simulation settings reference unknown catalog entries or bad sizes."""


def _check_common(spins: int, bet_size: float) -> None:
    if isinstance(spins, bool) or not isinstance(spins, int):
        raise ConfigurationError(f"spins must be an integer; got {spins!r}")
    if spins < 0:
        raise ConfigurationError(f"spins must be non-negative; got {spins}")
    if not bet_size > 0:
        raise ConfigurationError(f"bet_size must be positive; got {bet_size!r}")


@dataclass(frozen=True)
class SlotSettings:
    spins: int
    bet_size: float
    profile: SlotProfile = "balanced"

    machine: MachineType = "slot"

    def __post_init__(self) -> None:
        _check_common(self.spins, self.bet_size)
        if self.machine != "slot":
            raise ConfigurationError(f"SlotSettings.machine must be 'slot'; got {self.machine!r}")
        if self.profile not in SLOT_PROFILE_IDS:
            raise ConfigurationError(
                f"Unknown slot profile '{self.profile}'. Options: {', '.join(SLOT_PROFILE_IDS)}"
            )


@dataclass(frozen=True)
class RouletteSettings:
    spins: int
    bet_size: float
    bet: RouletteBet = "even-money"

    machine: MachineType = "roulette"

    def __post_init__(self) -> None:
        _check_common(self.spins, self.bet_size)
        if self.machine != "roulette":
            raise ConfigurationError(f"RouletteSettings.machine must be 'roulette'; got {self.machine!r}")
        if self.bet not in ROULETTE_BET_IDS:
            raise ConfigurationError(
                f"Unknown roulette bet '{self.bet}'. Options: {', '.join(ROULETTE_BET_IDS)}"
            )


SimulationSettings = Union[SlotSettings, RouletteSettings]


@dataclass(frozen=True)
class SimulationSummary:
    total_win_spins: int
    total_losing_spins: int
    final_net: float
    peak: float
    trough: float
    volatility: float

    @property
    def spins(self) -> int:
        return self.total_win_spins + self.total_losing_spins

    def win_rate(self) -> float:
        """Percentage of spins that returned a net profit (0.0 for empty sessions)."""

        spins = self.spins
        return 100.0 * self.total_win_spins / spins if spins else 0.0

    def loss_rate(self) -> float:
        spins = self.spins
        return 100.0 * self.total_losing_spins / spins if spins else 0.0


@dataclass(frozen=True)
class SimulationLine:
    """Cumulative net trajectory of one session plus its summary."""

    points: tuple[float, ...]
    summary: SimulationSummary
