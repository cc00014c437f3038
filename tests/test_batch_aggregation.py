from __future__ import annotations

import pytest

from bankrollsim.analysis.batch import calculate_mean_line, run_batch, seed_for_index
from bankrollsim.core.config import override_limits
from bankrollsim.core.engine_core import run_simulation
from bankrollsim.core.models import ConfigurationError, RouletteSettings, SimulationLine, SimulationSummary, SlotSettings
from bankrollsim.core.rng import create_seeded_random

BASE_SEED = 9645231
SLOT_FIVE = SlotSettings(spins=5, bet_size=1, profile="balanced")


def _line(points: list[float]) -> SimulationLine:
    summary = SimulationSummary(0, max(len(points) - 1, 0), points[-1], max(points), min(points), 0.0)
    return SimulationLine(points=tuple(points), summary=summary)


def test_seed_derivation_spacing_and_wraparound() -> None:
    assert seed_for_index(BASE_SEED, 0) == BASE_SEED
    assert seed_for_index(BASE_SEED, 3) == BASE_SEED + 3 * 9973
    assert seed_for_index(0xFFFFFFFF, 1) == 9972
    assert seed_for_index(-1, 0) == 0xFFFFFFFF
    assert seed_for_index(11, 0) != seed_for_index(12, 0)


def test_small_batch_matches_pinned_runs() -> None:
    result = run_batch(SLOT_FIVE, 3, BASE_SEED)
    assert [run.points for run in result.display_runs] == [
        (0.0, -1.0, -2.0, -3.0, -4.0, -3.0),
        (0.0, -1.0, -2.0, -3.0, -4.0, -5.0),
        (0.0, -1.0, -2.0, -3.0, -4.0, -4.5),
    ]
    assert result.mean_points[:5] == (0.0, -1.0, -2.0, -3.0, -4.0)
    assert result.mean_points[5] == pytest.approx(-12.5 / 3)
    assert result.total_final_net == -12.5
    assert result.tail is None
    assert [run.id for run in result.display_runs] == ["run-1", "run-2", "run-3"]
    assert [run.name for run in result.display_runs] == ["Run 1", "Run 2", "Run 3"]
    assert result.display_runs[0].win_rate == pytest.approx(20.0)
    assert result.display_runs[0].loss_rate == pytest.approx(80.0)


def test_tail_rollup_beyond_display_cap() -> None:
    result = run_batch(SLOT_FIVE, 3, BASE_SEED, display_cap=1)
    assert len(result.display_runs) == 1
    tail = result.tail
    assert tail is not None
    assert tail.count == 2
    assert tail.total_final == -9.5
    assert tail.win_spins == 0
    assert tail.loss_spins == 10
    assert tail.win_rate == 0.0
    assert tail.loss_rate == 100.0
    assert result.total_final_net == -12.5


def test_fold_matches_independent_runs() -> None:
    settings = RouletteSettings(spins=40, bet_size=2, bet="dozen")
    runs = 25
    result = run_batch(settings, runs, 77, display_cap=10)
    lines = [run_simulation(settings, create_seeded_random(seed_for_index(77, i))) for i in range(runs)]

    assert result.total_runs == runs
    assert result.total_final_net == pytest.approx(sum(line.summary.final_net for line in lines))
    displayed = sum(run.summary.final_net for run in result.display_runs)
    assert result.tail is not None
    assert displayed + result.tail.total_final == pytest.approx(result.total_final_net)

    assert len(result.mean_points) == settings.spins + 1
    for step, value in enumerate(result.mean_points):
        expected = sum(line.points[step] for line in lines) / runs
        assert value == pytest.approx(expected)

    tail_lines = lines[10:]
    tail_wins = sum(line.summary.total_win_spins for line in tail_lines)
    assert result.tail.win_rate == pytest.approx(100.0 * tail_wins / (len(tail_lines) * settings.spins))
    assert result.tail.win_rate + result.tail.loss_rate == pytest.approx(100.0)


def test_each_run_reproducible_from_base_and_index() -> None:
    settings = SlotSettings(spins=30, bet_size=1, profile="volatile")
    result = run_batch(settings, 6, 5150)
    fourth = result.display_runs[4]
    assert fourth.seed == seed_for_index(5150, 4)
    assert fourth.line == run_simulation(settings, create_seeded_random(fourth.seed))


def test_single_run_mean_equals_trajectory() -> None:
    for requested in (1, 0, -4):
        result = run_batch(SLOT_FIVE, requested, BASE_SEED)
        assert result.total_runs == 1
        assert result.tail is None
        assert result.mean_points == result.display_runs[0].points


def test_zero_spins_guard_tail_rates() -> None:
    result = run_batch(SlotSettings(spins=0, bet_size=1), 4, 1, display_cap=2)
    assert result.mean_points == (0.0,)
    assert result.tail is not None
    assert result.tail.win_rate == 0.0
    assert result.tail.loss_rate == 0.0


def test_display_cap_defaults_to_configured_limit() -> None:
    with override_limits(display_cap=2):
        result = run_batch(SLOT_FIVE, 5, BASE_SEED)
    assert len(result.display_runs) == 2
    assert result.tail is not None and result.tail.count == 3


def test_default_display_cap_is_one_hundred() -> None:
    result = run_batch(RouletteSettings(spins=2, bet_size=1), 120, BASE_SEED)
    assert len(result.display_runs) == 100
    assert result.tail is not None and result.tail.count == 20


def test_negative_display_cap_rejected() -> None:
    with pytest.raises(ConfigurationError):
        run_batch(SLOT_FIVE, 2, BASE_SEED, display_cap=-1)


def test_calculate_mean_line_handles_ragged_lines() -> None:
    assert calculate_mean_line([]) == []
    lines = [_line([0.0, 2.0, 4.0]), _line([0.0, -2.0])]
    assert calculate_mean_line(lines) == [0.0, 0.0, 4.0]
