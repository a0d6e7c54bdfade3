"""Tests for the headless batch simulation."""

import pytest

from snake_sim.config import GameConfig
from snake_sim.errors import InvariantViolation
from snake_sim.session import GameSession
from snake_sim.simulate import SimulationResult, simulate


class TestSimulationResult:
    def test_summary_format(self):
        result = SimulationResult(
            games=4,
            total_ticks=120,
            best_score=3,
            mean_score=1.25,
            wall_time_seconds=0.5,
            ticks_per_second=240.0,
        )
        summary = result.summary()
        assert "4 games" in summary
        assert "120 ticks" in summary
        assert "best score 3" in summary
        assert "ticks/s" in summary


class TestSimulate:
    def test_basic_run(self):
        result = simulate(GameConfig(seed=1), games=3, max_ticks_per_game=50)
        assert result.games == 3
        assert 0 < result.total_ticks <= 150
        assert result.best_score >= 0
        assert result.ticks_per_second > 0

    def test_deterministic_with_seed(self):
        a = simulate(GameConfig(seed=9), games=2, max_ticks_per_game=40)
        b = simulate(GameConfig(seed=9), games=2, max_ticks_per_game=40)
        assert a.total_ticks == b.total_ticks
        assert a.best_score == b.best_score

    def test_straight_line_hits_tick_cap(self):
        result = simulate(
            GameConfig(seed=0), games=1, max_ticks_per_game=25,
            turn_probability=0.0,
        )
        assert result.total_ticks == 25

    @pytest.mark.parametrize(
        "kwargs", [{"games": 0}, {"max_ticks_per_game": 0}],
    )
    def test_invalid_arguments(self, kwargs):
        with pytest.raises(ValueError, match="at least 1"):
            simulate(GameConfig(), **kwargs)


class TestSimulateLeakCheck:
    def test_leaked_visuals_raise(self, monkeypatch):
        monkeypatch.setattr(GameSession, "close", lambda self: None)
        with pytest.raises(InvariantViolation, match="leaked"):
            simulate(GameConfig(seed=0), games=1, max_ticks_per_game=5)
