"""Input sources that steer a session between ticks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Protocol

import numpy as np

from snake_sim.snake import Direction


class InputSource(Protocol):
    """Anything that can report the latest requested direction."""

    def poll_direction_input(self) -> Direction | None: ...


class ScriptedInput:
    """Replays a fixed sequence of per-tick inputs.

    ``None`` entries mean "no key pressed" for that tick. Once the script is
    exhausted every poll returns ``None``.
    """

    def __init__(self, script: Iterable[Direction | None] = ()) -> None:
        self._script: deque[Direction | None] = deque(script)

    def push(self, direction: Direction | None) -> None:
        self._script.append(direction)

    def poll_direction_input(self) -> Direction | None:
        if not self._script:
            return None
        return self._script.popleft()


class RandomInput:
    """Turns in a random direction with a fixed probability per poll."""

    _DIRECTIONS = list(Direction)

    def __init__(
        self,
        turn_probability: float = 0.2,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not 0.0 <= turn_probability <= 1.0:
            raise ValueError("turn_probability must be between 0 and 1.")
        self.turn_probability = turn_probability
        self.rng = rng if rng is not None else np.random.default_rng()

    def poll_direction_input(self) -> Direction | None:
        if self.rng.random() >= self.turn_probability:
            return None
        return self._DIRECTIONS[int(self.rng.integers(len(self._DIRECTIONS)))]
