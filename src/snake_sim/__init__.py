"""Snake Sim — tick-driven snake simulation core."""

from snake_sim.config import GameConfig, Palette
from snake_sim.food import Food, FoodPlacer
from snake_sim.grid import Grid, to_render_position, wrap
from snake_sim.render import HeadlessRenderer, Renderer, VisualHandle
from snake_sim.session import (
    GameSession,
    GameState,
    TickResult,
    check_collision,
    check_eat,
)
from snake_sim.snake import Direction, Segment, Snake

__all__ = [
    "Direction",
    "Food",
    "FoodPlacer",
    "GameConfig",
    "GameSession",
    "GameState",
    "Grid",
    "HeadlessRenderer",
    "Palette",
    "Renderer",
    "Segment",
    "Snake",
    "TickResult",
    "VisualHandle",
    "check_collision",
    "check_eat",
    "to_render_position",
    "wrap",
]
