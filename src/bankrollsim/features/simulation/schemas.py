from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

__all__ = [
    "BatchPayload",
    "CatalogPayload",
    "DisplayRunPayload",
    "LimitsPayload",
    "LinePayload",
    "OutcomePayload",
    "RouletteBetPayload",
    "SettingsPayload",
    "SlotProfilePayload",
    "SummaryPayload",
    "TailPayload",
]


class _APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SettingsPayload(_APIModel):
    machine: str
    spins: int
    bet_size: float
    profile: str | None = None
    bet: str | None = None


class SummaryPayload(_APIModel):
    total_win_spins: int
    total_losing_spins: int
    final_net: float
    peak: float
    trough: float
    volatility: float


class LinePayload(_APIModel):
    seed: int
    settings: SettingsPayload
    points: list[float]
    summary: SummaryPayload


class DisplayRunPayload(_APIModel):
    id: str
    name: str
    index: int
    seed: int
    points: list[float]
    summary: SummaryPayload
    win_rate: float
    loss_rate: float


class TailPayload(_APIModel):
    count: int
    total_final: float
    win_rate: float
    loss_rate: float


class BatchPayload(_APIModel):
    settings: SettingsPayload
    base_seed: int
    total_runs: int
    runs: list[DisplayRunPayload]
    mean_points: list[float]
    tail: TailPayload | None = None
    total_final_net: float


class OutcomePayload(_APIModel):
    probability: float
    multiplier: float


class SlotProfilePayload(_APIModel):
    id: str
    label: str
    outcomes: list[OutcomePayload]
    total_probability: float
    expected_return: float


class RouletteBetPayload(_APIModel):
    id: str
    label: str
    probability: float
    multiplier: float


class LimitsPayload(_APIModel):
    display_cap: int
    max_runs: int
    max_spins: int


class CatalogPayload(_APIModel):
    slot_profiles: list[SlotProfilePayload]
    roulette_bets: list[RouletteBetPayload]
    default_settings: SettingsPayload
    baseline_seed: int
    spin_presets: list[int]
    limits: LimitsPayload
