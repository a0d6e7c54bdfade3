"""Tests for the headless renderer."""

import pytest

from snake_sim.errors import InvariantViolation, VisualLifecycleError
from snake_sim.render import HeadlessRenderer, VisualHandle


class TestHeadlessRenderer:
    def test_spawn_tracks_visual(self):
        renderer = HeadlessRenderer()
        handle = renderer.spawn_visual(
            (20.0, -40.0), (0.8, 0.8, 0.8), (20.0, 20.0),
        )
        assert len(renderer) == 1
        assert renderer.position_of(handle) == (20.0, -40.0)
        assert renderer.visuals[handle].size == (20.0, 20.0)

    def test_handles_are_unique(self):
        renderer = HeadlessRenderer()
        a = renderer.spawn_visual((0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 1.0))
        b = renderer.spawn_visual((0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 1.0))
        assert a != b

    def test_update_position(self):
        renderer = HeadlessRenderer()
        handle = renderer.spawn_visual((0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 1.0))
        renderer.update_visual_position(handle, 5.0, 6.0)
        assert renderer.position_of(handle) == (5.0, 6.0)

    def test_release_removes_visual(self):
        renderer = HeadlessRenderer()
        handle = renderer.spawn_visual((0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 1.0))
        renderer.release_visual(handle)
        assert len(renderer) == 0
        assert renderer.spawned == 1
        assert renderer.released == 1


class TestHandleLifecycle:
    def test_double_release_is_fatal(self):
        renderer = HeadlessRenderer()
        handle = renderer.spawn_visual((0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 1.0))
        renderer.release_visual(handle)
        with pytest.raises(VisualLifecycleError, match="released"):
            renderer.release_visual(handle)

    def test_update_after_release_is_fatal(self):
        renderer = HeadlessRenderer()
        handle = renderer.spawn_visual((0.0, 0.0), (1.0, 1.0, 1.0), (1.0, 1.0))
        renderer.release_visual(handle)
        with pytest.raises(VisualLifecycleError):
            renderer.update_visual_position(handle, 1.0, 1.0)

    def test_unknown_handle(self):
        renderer = HeadlessRenderer()
        with pytest.raises(VisualLifecycleError, match="unknown"):
            renderer.release_visual(VisualHandle(99))

    def test_lifecycle_error_is_invariant_violation(self):
        assert issubclass(VisualLifecycleError, InvariantViolation)
