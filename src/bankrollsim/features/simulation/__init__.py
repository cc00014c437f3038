"""Simulation feature: service layer, schemas, and API router."""

from .router import BatchRequest, RunRequest, create_simulation_router
from .schemas import (
    BatchPayload,
    CatalogPayload,
    DisplayRunPayload,
    LinePayload,
    SettingsPayload,
    SummaryPayload,
    TailPayload,
)
from .service import SimulationConfig, SimulationService, build_settings

__all__ = [
    "BatchPayload",
    "BatchRequest",
    "CatalogPayload",
    "DisplayRunPayload",
    "LinePayload",
    "RunRequest",
    "SettingsPayload",
    "SimulationConfig",
    "SimulationService",
    "SummaryPayload",
    "TailPayload",
    "build_settings",
    "create_simulation_router",
]
