from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .. import __version__
from ..features.simulation import SimulationService, create_simulation_router
from ..features.simulation.concurrency import shutdown_executor

_DESCRIPTION = (
    "Seeded Monte Carlo bankroll sessions for slot and roulette machines. "
    "`/run` replays one session; `/batch` aggregates many runs derived from a base seed."
)


@asynccontextmanager
async def _lifespan(_: FastAPI) -> AsyncIterator[None]:
    try:
        yield
    finally:
        shutdown_executor()


app = FastAPI(title="Bankroll Simulator", version=__version__, description=_DESCRIPTION, lifespan=_lifespan)
_service = SimulationService()
app.include_router(create_simulation_router(_service))


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


def main() -> None:  # pragma: no cover - runner
    import uvicorn

    host = os.environ.get("BIND", "0.0.0.0")
    port = int(os.environ.get("PORT", "8000"))
    uvicorn.run(app, host=host, port=port, factory=False)


if __name__ == "__main__":  # pragma: no cover
    main()
