#!/usr/bin/env python3
"""
Camera utilities for 2D world-to-screen transforms.
"""
from typing import Tuple

from .constants import VIEW_HEIGHT, VIEW_MARGIN, VIEW_WIDTH


class Camera2D:
    """
    Maps world coordinates (meters, pivot at the origin, y down) to screen pixels.

    The pivot always sits at the center of the viewport and the zoom is chosen so
    that a pendulum fully stretched in any direction stays inside the window.
    """

    def __init__(self, reach: float, viewport_size: Tuple[int, int] = (VIEW_WIDTH, VIEW_HEIGHT)):
        self.reach = float(reach)
        self.viewport_size = viewport_size
        self.ppm = 1.0  # pixels per meter
        self.set_viewport_size(*viewport_size)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.viewport_size[0] / 2, self.viewport_size[1] / 2)

    def set_viewport_size(self, w: int, h: int) -> None:
        """Re-center on the new viewport and rescale to fit the reach."""
        self.viewport_size = (max(int(w), 1), max(int(h), 1))
        half = min(self.viewport_size) / 2
        self.ppm = half * VIEW_MARGIN / self.reach

    def world_to_screen(self, pos: Tuple[float, float]) -> Tuple[int, int]:
        cx, cy = self.center
        return (int(cx + pos[0] * self.ppm), int(cy + pos[1] * self.ppm))

    def screen_to_world(self, screen: Tuple[int, int]) -> Tuple[float, float]:
        cx, cy = self.center
        return ((screen[0] - cx) / self.ppm, (screen[1] - cy) / self.ppm)
