from __future__ import annotations

from fastapi.testclient import TestClient

from bankrollsim import __version__
from bankrollsim.features.simulation import concurrency
from bankrollsim.web.app import app


def test_web_endpoints_batch_flow() -> None:
    client = TestClient(app)
    assert client.get("/healthz").json() == {"status": "ok"}

    catalog = client.get("/api/v1/simulation/catalog")
    assert catalog.status_code == 200

    r = client.post("/api/v1/simulation/batch", json={"machine": "roulette", "bet": "even-money", "runs": 5})
    assert r.status_code == 200
    data = r.json()
    assert len(data["runs"]) == 5
    assert len(data["mean_points"]) == 201
    assert sum(run["summary"]["final_net"] for run in data["runs"]) == data["total_final_net"]


def test_openapi_lists_simulation_routes() -> None:
    schema = TestClient(app).get("/openapi.json").json()
    assert schema["info"]["title"] == "Bankroll Simulator"
    assert schema["info"]["version"] == __version__
    assert "/batch" in schema["info"]["description"]
    for path in ("/api/v1/simulation/catalog", "/api/v1/simulation/run", "/api/v1/simulation/batch"):
        assert path in schema["paths"]


def test_lifespan_shuts_down_batch_pool() -> None:
    with TestClient(app) as client:
        assert client.post("/api/v1/simulation/batch", json={"spins": 2, "runs": 2}).status_code == 200
        assert concurrency._executor is not None
    assert concurrency._executor is None
