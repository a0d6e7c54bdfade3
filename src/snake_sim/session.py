"""Session controller: lifecycle, collision and feeding for one game."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snake_sim.config import GameConfig
from snake_sim.errors import FoodPlacementError
from snake_sim.food import Food, FoodPlacer
from snake_sim.grid import Grid
from snake_sim.snake import Direction, Snake

if TYPE_CHECKING:
    from snake_sim.grid import Coordinate
    from snake_sim.render import Renderer, VisualHandle

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    """Lifecycle of a session."""

    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TickResult:
    """What happened during a single call to :meth:`GameSession.tick`."""

    tick: int
    state: GameState
    advanced: bool = False
    collided: bool = False
    ate: bool = False
    food_blocked: bool = False
    restarted: bool = False


def check_collision(positions: Sequence[Coordinate]) -> bool:
    """Return True if any two segments share a cell."""
    return len(set(positions)) != len(positions)


def check_eat(positions: Sequence[Coordinate], food: Coordinate) -> bool:
    """Return True if any segment sits on the food cell."""
    return any(pos == food for pos in positions)


class GameSession:
    """Single-snake, tick-driven game session.

    The session owns the grid, the snake and the food cell. Each call to
    :meth:`tick` runs one step of the pipeline: apply input, advance the
    snake, detect collision and feeding, then apply the state transition and
    growth. A game that ended stays in ``GAME_OVER`` until :meth:`restart`
    is called, unless ``config.auto_restart`` is set.

    A backdrop visual covering the play field lives for the whole session
    and is released by :meth:`close`.
    """

    def __init__(
        self,
        renderer: Renderer,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config or GameConfig()
        self.config = cfg
        self.renderer = renderer
        self.grid = Grid(
            width=cfg.grid_width,
            height=cfg.grid_height,
            cell_size=cfg.cell_size,
        )
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.food_placer = FoodPlacer(
            self.grid, rng=self.rng, max_attempts=cfg.max_food_attempts,
        )
        self.backdrop: VisualHandle | None = renderer.spawn_visual(
            (0.0, 0.0), cfg.palette.background, self.grid.render_extent,
        )
        self.snake = Snake(self.grid, renderer, color=cfg.palette.snake)
        self.food: Food | None = None
        self.state = GameState.PLAYING

        self.tick_count = 0
        self.score = 0
        self.games_played = 0

        self.reset()

    def set_direction(self, direction: Direction) -> None:
        """Steer the snake. The last call before a tick wins."""
        self.snake.set_direction(direction)

    def tick(self, direction: Direction | None = None) -> TickResult:
        """Advance the session by one tick.

        *direction*, when given, is applied before the snake moves. Ticks in
        ``GAME_OVER`` only record the input.
        """
        if direction is not None:
            self.set_direction(direction)

        self.tick_count += 1
        if self.state != GameState.PLAYING:
            return TickResult(tick=self.tick_count, state=self.state)

        self.snake.advance()
        positions = self.snake.positions
        collided = check_collision(positions)
        ate = self.food is not None and check_eat(positions, self.food.position)

        food_blocked = False
        if collided:
            self.state = GameState.GAME_OVER
            logger.info(
                "Snake collided with itself at tick %d with score %d.",
                self.tick_count, self.score,
            )
        elif ate:
            food_blocked = not self._consume_food()

        restarted = False
        if self.state == GameState.GAME_OVER and self.config.auto_restart:
            restarted = self.restart()

        return TickResult(
            tick=self.tick_count,
            state=self.state,
            advanced=True,
            collided=collided,
            ate=ate and not (collided or food_blocked),
            food_blocked=food_blocked,
            restarted=restarted,
        )

    def _consume_food(self) -> bool:
        """Swap the eaten food for a new one and queue growth.

        The next cell is chosen before anything changes. If none is left the
        game ends with the eaten food still in place and the score untouched.
        """
        assert self.food is not None  # noqa: S101
        try:
            position = self.food_placer.find_position(self.snake.positions)
        except FoodPlacementError as exc:
            self.state = GameState.GAME_OVER
            logger.info(
                "No room for food at tick %d with score %d: %s",
                self.tick_count, self.score, exc,
            )
            return False
        if self.food.visual is not None:
            self.renderer.release_visual(self.food.visual)
        self.food = None
        self.score += 1
        self.snake.request_growth()
        self._spawn_food(position)
        return True

    def place_food(self) -> Food:
        """Place a new food cell away from the snake and draw it."""
        return self._spawn_food(
            self.food_placer.find_position(self.snake.positions),
        )

    def _spawn_food(self, position: Coordinate) -> Food:
        food = Food(position)
        self.food = food
        food.visual = self.renderer.spawn_visual(
            self.grid.to_render_position(*position),
            self.config.palette.food,
            self.grid.cell_extent,
        )
        return food

    def reset(self) -> None:
        """Tear down any previous game and start a fresh one."""
        self._teardown()
        self.snake.initialize()
        self.place_food()
        self.state = GameState.PLAYING
        self.score = 0
        self.games_played += 1
        logger.debug("Game %d started.", self.games_played)

    def restart(self) -> bool:
        """Leave ``GAME_OVER`` and start a new game.

        Returns False, without touching the session, if a game is in
        progress.
        """
        if self.state != GameState.GAME_OVER:
            logger.warning("Restart ignored: a game is still in progress.")
            return False
        logger.info("Restarting after game %d.", self.games_played)
        self.reset()
        return True

    def close(self) -> None:
        """Release every visual owned by the session, backdrop included."""
        self._teardown()
        if self.backdrop is not None:
            self.renderer.release_visual(self.backdrop)
            self.backdrop = None

    def _teardown(self) -> None:
        if self.food is not None:
            if self.food.visual is not None:
                self.renderer.release_visual(self.food.visual)
            self.food = None
        self.snake.release()

    @property
    def game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    def get_state(self) -> dict:
        """Return the full, serializable session state."""
        snake = self.snake.to_dict()
        return {
            "tick": self.tick_count,
            "score": self.score,
            "games_played": self.games_played,
            "state": self.state.value,
            "direction": snake["direction"],
            "snake": snake["body"],
            "food": list(self.food.position) if self.food is not None else None,
            "grid": self.grid.to_dict(),
        }
