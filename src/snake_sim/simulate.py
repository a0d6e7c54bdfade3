"""Headless batch simulation for smoke runs and throughput checks."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, replace

import numpy as np

from snake_sim.config import GameConfig
from snake_sim.controls import RandomInput
from snake_sim.errors import InvariantViolation
from snake_sim.render import HeadlessRenderer
from snake_sim.session import GameSession

logger = logging.getLogger(__name__)


@dataclass
class SimulationResult:
    """Results from a batch of headless games."""

    games: int
    total_ticks: int
    best_score: int
    mean_score: float
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Simulation: {self.games} games, {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | best score {self.best_score}, "
            f"mean score {self.mean_score:.2f}, "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def simulate(
    config: GameConfig | None = None,
    *,
    games: int = 10,
    max_ticks_per_game: int = 1_000,
    turn_probability: float = 0.2,
) -> SimulationResult:
    """Play *games* sessions with random steering and no real-time pacing.

    A game ends on collision or after *max_ticks_per_game* ticks, whichever
    comes first. Each game gets its own renderer, which must hold no visuals
    once the session is closed.
    """
    if games < 1:
        raise ValueError("games must be at least 1.")
    if max_ticks_per_game < 1:
        raise ValueError("max_ticks_per_game must be at least 1.")

    cfg = replace(config or GameConfig(), auto_restart=False)
    rng = np.random.default_rng(cfg.seed)
    controls = RandomInput(turn_probability, rng=rng)

    scores: list[int] = []
    total_ticks = 0
    t0 = time.perf_counter()
    for _ in range(games):
        renderer = HeadlessRenderer()
        session = GameSession(renderer, cfg, rng=rng)
        for _ in range(max_ticks_per_game):
            session.tick(controls.poll_direction_input())
            if session.game_over:
                break
        total_ticks += session.tick_count
        scores.append(session.score)
        session.close()
        if len(renderer):
            raise InvariantViolation(
                f"Session leaked {len(renderer)} visual(s) on close."
            )
    elapsed = max(time.perf_counter() - t0, 1e-9)

    result = SimulationResult(
        games=games,
        total_ticks=total_ticks,
        best_score=max(scores),
        mean_score=float(np.mean(scores)),
        wall_time_seconds=elapsed,
        ticks_per_second=total_ticks / elapsed,
    )
    logger.info(result.summary())
    return result
