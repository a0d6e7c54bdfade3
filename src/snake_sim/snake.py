"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

from snake_sim.errors import InvariantViolation

if TYPE_CHECKING:
    from snake_sim.grid import Coordinate, Grid
    from snake_sim.render import Color, Renderer, VisualHandle


class Direction(enum.Enum):
    """Cardinal movement directions with (x_delta, y_delta) values."""

    UP = (0, 1)
    DOWN = (0, -1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


@dataclass
class Segment:
    """One body cell paired with the visual that draws it."""

    position: Coordinate
    visual: VisualHandle


class Snake:
    """A snake represented as an ordered list of body segments.

    The head is ``segments[0]``; the tail is ``segments[-1]``. Every segment
    owns exactly one visual obtained from the renderer, which the snake
    keeps in sync with the segment's grid position.
    """

    def __init__(
        self,
        grid: Grid,
        renderer: Renderer,
        color: Color = (0.8, 0.8, 0.8),
    ) -> None:
        self.grid = grid
        self.renderer = renderer
        self.color = color
        self.direction = Direction.UP
        self.segments: list[Segment] = []
        self.pending_growth = False

    @property
    def head(self) -> Coordinate:
        """Return the head coordinate."""
        if not self.segments:
            raise InvariantViolation("Snake has no segments.")
        return self.segments[0].position

    @property
    def positions(self) -> list[Coordinate]:
        """Return segment positions from head to tail."""
        return [seg.position for seg in self.segments]

    def __len__(self) -> int:
        return len(self.segments)

    def initialize(self) -> None:
        """Seed a single segment at the origin heading up."""
        if self.segments:
            raise InvariantViolation(
                "Cannot initialize a snake that still owns segments."
            )
        self.direction = Direction.UP
        self.pending_growth = False
        self.segments.append(self._spawn_segment((0, 0)))

    def release(self) -> None:
        """Release every segment visual and drop the body."""
        for seg in self.segments:
            self.renderer.release_visual(seg.visual)
        self.segments.clear()

    def set_direction(self, direction: Direction) -> None:
        """Change direction. Reversals are accepted as-is."""
        self.direction = direction

    def request_growth(self) -> None:
        """Grow by one segment on the next :meth:`advance`.

        Repeated requests before that advance still add a single segment.
        """
        self.pending_growth = True

    def advance(self) -> tuple[Coordinate, Coordinate]:
        """Move the snake one step forward.

        Every trailing segment takes the position its predecessor held before
        the move. Returns ``(previous_head, vacated_tail)``; a pending growth
        request appends the new segment at ``vacated_tail``.
        """
        if not self.segments:
            raise InvariantViolation("Cannot advance a snake with no segments.")

        previous = self.positions
        dx, dy = self.direction.value
        hx, hy = previous[0]
        self.segments[0].position = self.grid.wrap(hx + dx, hy + dy)
        for seg, old in zip(self.segments[1:], previous, strict=False):
            seg.position = old
        vacated = previous[-1]

        for seg in self.segments:
            self.renderer.update_visual_position(
                seg.visual, *self.grid.to_render_position(*seg.position),
            )

        if self.pending_growth:
            self.pending_growth = False
            self.segments.append(self._spawn_segment(vacated))

        return previous[0], vacated

    def _spawn_segment(self, position: Coordinate) -> Segment:
        visual = self.renderer.spawn_visual(
            self.grid.to_render_position(*position),
            self.color,
            self.grid.cell_extent,
        )
        return Segment(position, visual)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "body": [list(seg.position) for seg in self.segments],
            "direction": self.direction.name.lower(),
            "pending_growth": self.pending_growth,
        }
