"""Session configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Palette:
    """RGB colors handed to the renderer with each spawned visual."""

    background: tuple[float, float, float] = (0.1, 0.1, 0.1)
    snake: tuple[float, float, float] = (0.8, 0.8, 0.8)
    food: tuple[float, float, float] = (0.7, 0.7, 0.7)


@dataclass(frozen=True)
class GameConfig:
    """Full session configuration.

    Supports JSON serialization for reproducibility.
    """

    # Grid
    grid_width: int = 40
    grid_height: int = 30
    cell_size: float = 20.0

    # Timing
    tick_seconds: float = 5.0 / 60.0

    # Food placement
    seed: int | None = None
    max_food_attempts: int | None = None

    # Lifecycle
    auto_restart: bool = False

    palette: Palette = field(default_factory=Palette)

    def __post_init__(self) -> None:
        if self.grid_width < 4 or self.grid_height < 4:
            raise ValueError("grid_width and grid_height must each be at least 4.")
        if self.cell_size <= 0:
            raise ValueError("cell_size must be positive.")
        if self.tick_seconds <= 0:
            raise ValueError("tick_seconds must be positive.")
        if self.max_food_attempts is not None and self.max_food_attempts < 1:
            raise ValueError("max_food_attempts must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        """Build a config from a plain dict such as :meth:`to_dict` returns."""
        data = dict(raw)
        palette_data = data.pop("palette", {})
        data["palette"] = Palette(
            **{key: tuple(value) for key, value in palette_data.items()}
        )
        return cls(**data)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))
