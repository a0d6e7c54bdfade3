"""Toroidal grid geometry for the snake simulation."""

from __future__ import annotations

# Grid coordinates are (x, y) with y growing upwards and (0, 0) at the centre.
Coordinate = tuple[int, int]


def wrap(coord: Coordinate, half_width: int, half_height: int) -> Coordinate:
    """Re-enter a coordinate that stepped past an edge at the opposite edge.

    The bounds are inclusive on both sides, so ``x == half_width`` is still
    on the grid and only ``half_width + 1`` wraps to ``-half_width``.
    """
    x, y = coord
    if x > half_width:
        x = -half_width
    elif x < -half_width:
        x = half_width
    if y > half_height:
        y = -half_height
    elif y < -half_height:
        y = half_height
    return x, y


def to_render_position(coord: Coordinate, cell_size: float) -> tuple[float, float]:
    """Map a grid cell to its continuous render position."""
    x, y = coord
    return float(x * cell_size), float(y * cell_size)


class Grid:
    """Fixed-size wrap-around grid centred on the origin.

    ``width`` and ``height`` count cells; the reachable coordinates after
    wrapping are ``-width // 2 <= x <= width // 2`` and likewise for ``y``.
    """

    def __init__(
        self,
        width: int = 40,
        height: int = 30,
        cell_size: float = 20.0,
    ) -> None:
        if width < 4 or height < 4:
            raise ValueError("Grid dimensions must be at least 4×4.")
        if cell_size <= 0:
            raise ValueError("cell_size must be positive.")
        self.width = width
        self.height = height
        self.cell_size = cell_size

    @property
    def half_width(self) -> int:
        return self.width // 2

    @property
    def half_height(self) -> int:
        return self.height // 2

    @property
    def cell_extent(self) -> tuple[float, float]:
        """Size of one cell in render units."""
        return self.cell_size, self.cell_size

    @property
    def render_extent(self) -> tuple[float, float]:
        """Size of the play-field backdrop in render units."""
        return (
            (self.width + 1) * self.cell_size,
            (self.height + 1) * self.cell_size,
        )

    def wrap(self, x: int, y: int) -> Coordinate:
        """Wrap coordinates around the grid edges."""
        return wrap((x, y), self.half_width, self.half_height)

    def to_render_position(self, x: int, y: int) -> tuple[float, float]:
        """Return the render position of the cell at ``(x, y)``."""
        return to_render_position((x, y), self.cell_size)

    def to_dict(self) -> dict:
        """Serialize grid geometry to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cell_size": self.cell_size,
        }
