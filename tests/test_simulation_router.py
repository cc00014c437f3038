from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bankrollsim.core.config import override_limits
from bankrollsim.features.simulation import SimulationService, create_simulation_router

BASE = "/api/v1/simulation"


def _client() -> TestClient:
    app = FastAPI()
    app.include_router(create_simulation_router(SimulationService()))
    return TestClient(app)


def test_catalog_lists_profiles_bets_and_defaults() -> None:
    data = _client().get(f"{BASE}/catalog").json()
    assert [profile["id"] for profile in data["slot_profiles"]] == ["steady", "balanced", "volatile"]
    balanced = data["slot_profiles"][1]
    assert balanced["label"] == "Balanced (casino default)"
    assert balanced["outcomes"][0] == {"probability": 0.5937, "multiplier": 0.0}
    assert 0.0 < balanced["expected_return"] < 1.0
    assert all(profile["total_probability"] == pytest.approx(1.0) for profile in data["slot_profiles"])
    bets = {bet["id"]: bet for bet in data["roulette_bets"]}
    assert bets["even-money"]["label"] == "Red / Black (1:1)"
    assert bets["single-number"]["multiplier"] == 36
    assert data["default_settings"] == {"machine": "slot", "spins": 200, "bet_size": 1.0, "profile": "balanced"}
    assert data["baseline_seed"] == 9645231
    assert data["spin_presets"][-1] == 1000
    assert data["limits"]["display_cap"] == 100


def test_run_endpoint_replays_pinned_trajectory() -> None:
    response = _client().post(
        f"{BASE}/run",
        json={"machine": "slot", "profile": "balanced", "spins": "3", "bet_size": 10, "seed": 42},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["seed"] == 42
    assert data["points"] == [0.0, -5.0, -15.0, -5.0]
    assert data["summary"]["total_win_spins"] == 1
    assert data["settings"]["profile"] == "balanced"


def test_run_endpoint_echoes_generated_seed() -> None:
    data = _client().post(f"{BASE}/run", json={"machine": "roulette", "bet": "dozen", "spins": 12}).json()
    assert isinstance(data["seed"], int)
    assert len(data["points"]) == 13
    assert data["settings"] == {"machine": "roulette", "spins": 12, "bet_size": 1.0, "bet": "dozen"}


def test_batch_endpoint_returns_runs_mean_and_tail() -> None:
    client = _client()
    with override_limits(display_cap=1):
        response = client.post(
            f"{BASE}/batch",
            json={"machine": "slot", "spins": 5, "bet_size": 1, "runs": 3, "seed": 9645231},
        )
    assert response.status_code == 200
    data = response.json()
    assert data["total_runs"] == 3
    assert data["base_seed"] == 9645231
    assert [run["id"] for run in data["runs"]] == ["run-1"]
    assert data["runs"][0]["points"] == [0.0, -1.0, -2.0, -3.0, -4.0, -3.0]
    assert data["tail"] == {"count": 2, "total_final": -9.5, "win_rate": 0.0, "loss_rate": 100.0}
    assert data["total_final_net"] == -12.5
    assert len(data["mean_points"]) == 6


def test_batch_endpoint_clamps_runs_and_spins() -> None:
    client = _client()
    with override_limits(max_runs=4, max_spins=7):
        data = client.post(f"{BASE}/batch", json={"runs": 50, "spins": 5000}).json()
    assert data["total_runs"] == 4
    assert data["settings"]["spins"] == 7
    assert "tail" not in data

    data = client.post(f"{BASE}/batch", json={"runs": 0, "spins": 2}).json()
    assert data["total_runs"] == 1
    assert data["base_seed"] == 9645231


def test_unknown_catalog_entries_return_400() -> None:
    client = _client()
    assert client.post(f"{BASE}/run", json={"machine": "slot", "profile": "jackpot"}).status_code == 400
    assert client.post(f"{BASE}/batch", json={"machine": "roulette", "bet": "corner"}).status_code == 400
    assert client.post(f"{BASE}/run", json={"machine": "poker"}).status_code == 400
    assert client.post(f"{BASE}/run", json={"bet_size": 0}).status_code == 400


def test_batch_endpoint_uses_base_seed_for_every_run() -> None:
    client = _client()
    data = client.post(f"{BASE}/batch", json={"spins": 5, "runs": 2, "base_seed": 77}).json()
    assert data["base_seed"] == 77
    assert [run["seed"] for run in data["runs"]] == [77, 77 + 9973]

    coerced = client.post(f"{BASE}/batch", json={"spins": 5, "runs": 2, "base_seed": "77"}).json()
    assert coerced["runs"] == data["runs"]

    preferred = client.post(f"{BASE}/batch", json={"spins": 5, "runs": 1, "base_seed": 77, "seed": 5}).json()
    assert preferred["base_seed"] == 77
