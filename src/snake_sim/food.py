"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from snake_sim.errors import FoodPlacementError

if TYPE_CHECKING:
    from snake_sim.grid import Coordinate, Grid
    from snake_sim.render import VisualHandle

logger = logging.getLogger(__name__)


@dataclass
class Food:
    """The single eatable cell. ``visual`` is None until it is drawn."""

    position: Coordinate
    visual: VisualHandle | None = None


def is_clear(candidate: Coordinate, occupied: Sequence[Coordinate]) -> bool:
    """Return True if no occupied cell shares a row or a column with *candidate*."""
    if not occupied:
        return True
    cells = np.asarray(occupied, dtype=np.int64)
    x, y = candidate
    return not (np.any(cells[:, 0] == x) or np.any(cells[:, 1] == y))


class FoodPlacer:
    """Samples food cells away from the snake.

    Candidates are drawn uniformly from ``[-half_width, half_width)`` by
    ``[-half_height, half_height)`` and rejected while any snake segment
    shares their x or their y coordinate. Uses a seeded NumPy RNG for
    deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def find_position(self, occupied: Sequence[Coordinate]) -> Coordinate:
        """Pick a random admissible cell for the next food.

        Raises :class:`FoodPlacementError` when the snake covers every
        sampleable column or row, or when ``max_attempts`` samples were all
        rejected.
        """
        hw, hh = self.grid.half_width, self.grid.half_height
        xs = {x for x, _ in occupied}
        ys = {y for _, y in occupied}
        if xs.issuperset(range(-hw, hw)) or ys.issuperset(range(-hh, hh)):
            raise FoodPlacementError(
                f"No free column or row left for food among {len(occupied)} "
                "occupied cells."
            )

        attempts = 0
        while self.max_attempts is None or attempts < self.max_attempts:
            attempts += 1
            candidate = (
                int(self.rng.integers(-hw, hw)),
                int(self.rng.integers(-hh, hh)),
            )
            if is_clear(candidate, occupied):
                logger.debug(
                    "Food placed at %s after %d attempt(s).", candidate, attempts,
                )
                return candidate

        raise FoodPlacementError(
            f"Food placement gave up after {attempts} attempts."
        )
