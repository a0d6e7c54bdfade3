"""Contract between the simulation and its rendering collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType, Protocol

from snake_sim.errors import VisualLifecycleError

# Opaque token issued by a renderer. The simulation never interprets it.
VisualHandle = NewType("VisualHandle", int)

Color = tuple[float, float, float]
Size = tuple[float, float]


class Renderer(Protocol):
    """Anything able to spawn, move and release visuals on behalf of a session."""

    def spawn_visual(
        self, position: tuple[float, float], color: Color, size: Size,
    ) -> VisualHandle: ...

    def update_visual_position(
        self, handle: VisualHandle, x: float, y: float,
    ) -> None: ...

    def release_visual(self, handle: VisualHandle) -> None: ...


@dataclass
class Visual:
    """A renderable unit tracked by :class:`HeadlessRenderer`."""

    position: tuple[float, float]
    color: Color
    size: Size


class HeadlessRenderer:
    """In-memory renderer that draws nothing but tracks every visual.

    Handles are issued from a monotonically increasing counter and are never
    reused, so a stale handle is always detected.
    """

    def __init__(self) -> None:
        self.visuals: dict[VisualHandle, Visual] = {}
        self._next_handle = 0
        self.spawned = 0
        self.released = 0

    def spawn_visual(
        self, position: tuple[float, float], color: Color, size: Size,
    ) -> VisualHandle:
        handle = VisualHandle(self._next_handle)
        self._next_handle += 1
        self.visuals[handle] = Visual(tuple(position), tuple(color), tuple(size))
        self.spawned += 1
        return handle

    def update_visual_position(
        self, handle: VisualHandle, x: float, y: float,
    ) -> None:
        self._require(handle, "update").position = (x, y)

    def release_visual(self, handle: VisualHandle) -> None:
        self._require(handle, "release")
        del self.visuals[handle]
        self.released += 1

    def position_of(self, handle: VisualHandle) -> tuple[float, float]:
        """Return the current render position of a live visual."""
        return self._require(handle, "read").position

    def _require(self, handle: VisualHandle, action: str) -> Visual:
        visual = self.visuals.get(handle)
        if visual is None:
            state = "released" if 0 <= handle < self._next_handle else "unknown"
            raise VisualLifecycleError(
                f"Cannot {action} {state} visual handle {handle}."
            )
        return visual

    def __len__(self) -> int:
        return len(self.visuals)
