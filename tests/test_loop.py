"""Tests for the async tick loop."""

import asyncio

import pytest

from snake_sim.config import GameConfig
from snake_sim.controls import ScriptedInput
from snake_sim.loop import run_session
from snake_sim.render import HeadlessRenderer
from snake_sim.session import GameSession, GameState
from snake_sim.snake import Direction, Segment


def _session(**overrides):
    return GameSession(HeadlessRenderer(), GameConfig(seed=0, **overrides))


def _make_long(session):
    session.snake.release()
    for pos in [(0, 0), (0, -1), (0, -2)]:
        handle = session.renderer.spawn_visual(
            (0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 1.0),
        )
        session.snake.segments.append(Segment(pos, handle))


class TestRunSession:
    @pytest.mark.asyncio
    async def test_runs_max_ticks(self):
        session = _session()
        results = await run_session(
            session, ScriptedInput(), tick_seconds=0, max_ticks=5,
        )
        assert len(results) == 5
        assert session.snake.positions == [(0, 5)]

    @pytest.mark.asyncio
    async def test_polls_input_once_per_tick(self):
        session = _session()
        controls = ScriptedInput([Direction.RIGHT, None, Direction.DOWN])
        await run_session(session, controls, tick_seconds=0, max_ticks=3)
        assert session.snake.positions == [(2, -1)]

    @pytest.mark.asyncio
    async def test_stops_on_game_over(self):
        session = _session()
        _make_long(session)
        results = await run_session(
            session, ScriptedInput([Direction.DOWN]),
            tick_seconds=0, max_ticks=10,
        )
        assert len(results) == 1
        assert results[-1].state == GameState.GAME_OVER

    @pytest.mark.asyncio
    async def test_auto_restart_keeps_running(self):
        session = _session(auto_restart=True)
        _make_long(session)
        results = await run_session(
            session, ScriptedInput([Direction.DOWN]),
            tick_seconds=0, max_ticks=4,
        )
        assert len(results) == 4
        assert results[0].restarted
        assert session.games_played == 2

    @pytest.mark.asyncio
    async def test_on_tick_callback(self):
        seen = []
        await run_session(
            _session(), ScriptedInput(),
            tick_seconds=0, max_ticks=3, on_tick=seen.append,
        )
        assert [r.tick for r in seen] == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_invalid_arguments(self):
        with pytest.raises(ValueError, match="max_ticks"):
            await run_session(_session(), ScriptedInput(), max_ticks=-1)

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        task = asyncio.create_task(
            run_session(_session(), ScriptedInput(), tick_seconds=10),
        )
        await asyncio.sleep(0)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task
