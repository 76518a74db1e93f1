#!/usr/bin/env python3
"""
Camera utilities for mapping the scaled display plane to window pixels.
"""
from typing import Optional, Tuple
from .constants import (
    MIN_VIEW_HEIGHT,
    MIN_VIEW_WIDTH,
    VIEW_HEIGHT,
    VIEW_WIDTH,
)
from .data_models import Position

MIN_ZOOM = 0.25
MAX_ZOOM = 40.0


class Camera2D:
    """
    Simple 2D camera; one display unit is one pixel at zoom 1.

    The viewport never shrinks below the minimum window size so orbit rings
    keep a usable area on small screens.
    """

    def __init__(self, center=(0.0, 0.0), zoom: float = 1.0):
        self.center = [center[0], center[1]]
        self.zoom_level = zoom
        self.viewport_size = (VIEW_WIDTH, VIEW_HEIGHT)

    def set_viewport_size(self, w: int, h: int) -> None:
        self.viewport_size = (max(w, MIN_VIEW_WIDTH), max(h, MIN_VIEW_HEIGHT))

    def follow(self, pos: Optional[Position]) -> None:
        """Center the view on a position, or on the origin when pos is None."""
        if pos is None:
            self.center = [0.0, 0.0]
        else:
            self.center = [pos.x, pos.y]

    def _half_viewport(self) -> Position:
        return Position(self.viewport_size[0] / 2, self.viewport_size[1] / 2)

    def world_to_screen(self, pos: Position) -> Tuple[int, int]:
        offset = pos - Position(*self.center)
        screen = Position(offset.x * self.zoom_level, offset.y * self.zoom_level) + self._half_viewport()
        return (int(screen.x), int(screen.y))

    def screen_to_world(self, screen: Tuple[int, int]) -> Position:
        offset = Position(*screen) - self._half_viewport()
        return Position(offset.x / self.zoom_level, offset.y / self.zoom_level) + Position(*self.center)

    def length_to_pixels(self, length: float) -> int:
        return int(length * self.zoom_level)

    def zoom(self, factor):
        factor = max(0.05, min(20.0, factor))
        self.zoom_level = max(MIN_ZOOM, min(MAX_ZOOM, self.zoom_level * factor))

    def reset(self):
        self.center = [0.0, 0.0]
        self.zoom_level = 1.0
