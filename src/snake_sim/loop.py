"""Fixed-rate async tick loop driving a session."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from snake_sim.session import GameState, TickResult

if TYPE_CHECKING:
    from snake_sim.controls import InputSource
    from snake_sim.session import GameSession

logger = logging.getLogger(__name__)


async def run_session(
    session: GameSession,
    controls: InputSource,
    *,
    tick_seconds: float | None = None,
    max_ticks: int | None = None,
    on_tick: Callable[[TickResult], None] | None = None,
) -> list[TickResult]:
    """Run the tick pipeline once per quantum until the game ends.

    Input is polled exactly once per tick, right before the snake moves.
    The loop stops after *max_ticks* ticks, or on the first tick that
    leaves the session in ``GAME_OVER``. With ``auto_restart`` enabled the
    session never stays there, so *max_ticks* is the only bound.
    """
    interval = (
        tick_seconds if tick_seconds is not None
        else session.config.tick_seconds
    )
    if interval < 0:
        raise ValueError("tick_seconds must be >= 0.")
    if max_ticks is not None and max_ticks < 0:
        raise ValueError("max_ticks must be >= 0.")

    results: list[TickResult] = []
    try:
        while max_ticks is None or len(results) < max_ticks:
            await asyncio.sleep(interval)
            result = session.tick(controls.poll_direction_input())
            results.append(result)
            if on_tick is not None:
                on_tick(result)
            if result.state == GameState.GAME_OVER:
                break
    except asyncio.CancelledError:
        logger.info("Tick loop cancelled after %d ticks.", len(results))
        raise
    except Exception:
        logger.exception("Tick loop error after %d ticks.", len(results))
        raise
    return results
