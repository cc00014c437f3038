from __future__ import annotations

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, model_validator

from ...core.catalog import DEFAULT_SETTINGS
from ...core.config import load_limits
from ...core.models import ConfigurationError
from .service import SimulationConfig, SimulationService

__all__ = ["BatchRequest", "RunRequest", "create_simulation_router"]

_INT_FIELDS = ("spins", "seed", "base_seed", "runs")


class RunRequest(BaseModel):
    machine: str = "slot"
    spins: int | None = None
    bet_size: float | None = None
    profile: str | None = None
    bet: str | None = None
    seed: int | None = None

    @model_validator(mode="before")
    @classmethod
    def _coerce(cls, data: dict[str, object]) -> dict[str, object]:
        if not isinstance(data, dict):
            return data
        cleaned: dict[str, object] = dict(data)
        for field in _INT_FIELDS:
            value = cleaned.get(field)
            if value in (None, ""):
                cleaned[field] = None
                continue
            if isinstance(value, str):
                try:
                    cleaned[field] = int(value)
                except ValueError:
                    cleaned[field] = None
        for field in ("machine", "profile", "bet"):
            value = cleaned.get(field)
            if isinstance(value, str):
                cleaned[field] = value.strip().lower() or None
        if cleaned.get("machine") is None:
            cleaned.pop("machine", None)
        return cleaned

    @model_validator(mode="after")
    def _normalize(self) -> RunRequest:
        limits = load_limits()
        spins = self.spins if self.spins is not None else DEFAULT_SETTINGS.spins
        self.spins = min(max(spins, 0), limits.max_spins)
        if self.bet_size is None:
            self.bet_size = DEFAULT_SETTINGS.bet_size
        return self

    def to_config(self) -> SimulationConfig:
        return SimulationConfig(
            machine=self.machine,
            spins=self.spins,
            bet_size=self.bet_size,
            profile=self.profile,
            bet=self.bet,
            seed=self.seed,
        )


class BatchRequest(RunRequest):
    runs: int | None = None
    # ``seed`` is accepted as a shorthand; ``base_seed`` wins when both are sent.
    base_seed: int | None = None

    @model_validator(mode="after")
    def _clamp_runs(self) -> BatchRequest:
        runs = self.runs if self.runs is not None else 1
        self.runs = min(max(runs, 1), load_limits().max_runs)
        return self

    def to_config(self) -> SimulationConfig:
        return SimulationConfig(
            machine=self.machine,
            spins=self.spins,
            bet_size=self.bet_size,
            profile=self.profile,
            bet=self.bet,
            runs=self.runs,
            seed=self.base_seed if self.base_seed is not None else self.seed,
        )


class _SimulationController:
    def __init__(self, service: SimulationService) -> None:
        self.service = service

    def _json_response(self, data: dict[str, object]) -> JSONResponse:
        return JSONResponse(data)

    async def catalog(self) -> JSONResponse:
        return self._json_response(self.service.catalog().to_dict())

    async def run(self, body: RunRequest) -> JSONResponse:
        try:
            payload = await self.service.run_async(body.to_config())
        except ConfigurationError as exc:
            raise HTTPException(400, str(exc)) from exc
        return self._json_response(payload.to_dict())

    async def batch(self, body: BatchRequest) -> JSONResponse:
        try:
            payload = await self.service.batch_async(body.to_config())
        except ConfigurationError as exc:
            raise HTTPException(400, str(exc)) from exc
        return self._json_response(payload.to_dict())


def create_simulation_router(service: SimulationService) -> APIRouter:
    controller = _SimulationController(service)
    router = APIRouter(prefix="/api/v1/simulation", tags=["simulation"])

    @router.get("/catalog")
    async def get_catalog() -> JSONResponse:
        return await controller.catalog()

    @router.post("/run")
    async def post_run(body: RunRequest) -> JSONResponse:
        return await controller.run(body)

    @router.post("/batch")
    async def post_batch(body: BatchRequest) -> JSONResponse:
        return await controller.batch(body)

    return router
