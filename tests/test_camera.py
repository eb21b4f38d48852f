"""Tests for pendulum_core.camera: centering and fit-to-window scaling."""

import pytest

from pendulum_core.camera import Camera2D


class TestCamera:
    def test_pivot_at_window_center(self):
        cam = Camera2D(reach=2.0)
        assert cam.viewport_size == (400, 400)
        assert cam.world_to_screen((0.0, 0.0)) == (200, 200)

    def test_reach_fits_inside_window(self):
        cam = Camera2D(reach=2.0)
        assert cam.ppm == pytest.approx(90.0)
        assert cam.world_to_screen((2.0, 2.0)) == (380, 380)
        assert cam.world_to_screen((-2.0, 0.0)) == (20, 200)

    def test_resize_recenters_and_rescales(self):
        cam = Camera2D(reach=2.0)
        cam.set_viewport_size(800, 600)
        assert cam.center == (400.0, 300.0)
        assert cam.ppm == pytest.approx(135.0)
        assert cam.world_to_screen((0.0, 2.0)) == (400, 570)

    def test_screen_to_world_inverts(self):
        cam = Camera2D(reach=3.0, viewport_size=(300, 500))
        wx, wy = cam.screen_to_world(cam.world_to_screen((1.0, -1.0)))
        assert wx == pytest.approx(1.0, abs=1.0 / cam.ppm)
        assert wy == pytest.approx(-1.0, abs=1.0 / cam.ppm)

    def test_scale_is_inverse_to_reach(self):
        short = Camera2D(reach=0.5)
        long = Camera2D(reach=4.0)
        assert short.ppm == pytest.approx(360.0)
        assert long.ppm == pytest.approx(45.0)

    def test_degenerate_viewport_is_clamped(self):
        cam = Camera2D(reach=1.0)
        cam.set_viewport_size(0, 0)
        assert cam.viewport_size == (1, 1)
