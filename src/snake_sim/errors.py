"""Exceptions raised by the snake simulation."""

from __future__ import annotations


class SimulationError(RuntimeError):
    """Base class for simulation failures."""


class InvariantViolation(SimulationError):
    """A lifecycle invariant was broken; the session state is unusable."""


class VisualLifecycleError(InvariantViolation):
    """A visual handle was used after release or was never issued."""


class FoodPlacementError(SimulationError):
    """No admissible food cell could be found."""
