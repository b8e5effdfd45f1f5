"""Pygame chart renderer."""
from __future__ import annotations

from typing import Sequence

import pygame

from tick_chart.config import PointBounds
from tick_chart.point import Point

BG_COLOR = (255, 255, 255)
AXIS_COLOR = (0, 0, 0)
LINE_COLOR = (0, 0, 0)
MARKER_FILL = (255, 255, 255)
MARKER_OUTLINE = (0, 0, 0)


def draw_axis(surface: pygame.Surface, padding: int) -> None:
    """Draw the y axis down the left edge and the x axis along the bottom."""
    w, h = surface.get_size()
    corners = [(padding, padding), (padding, h - padding), (w - padding, h - padding)]
    pygame.draw.lines(surface, AXIS_COLOR, False, corners, 1)


def draw_marker(surface: pygame.Surface, x: float, y: float, radius: int) -> None:
    center = (round(x), round(y))
    pygame.draw.circle(surface, MARKER_FILL, center, radius)
    pygame.draw.circle(surface, MARKER_OUTLINE, center, radius, 1)


class PygameRenderer:
    """Render callback drawing the chart onto a pygame surface."""

    def __init__(self, surface: pygame.Surface, bounds: PointBounds) -> None:
        self.surface = surface
        self.bounds = bounds
        self.frames = 0

    def __call__(self, points: Sequence[Point]) -> None:
        self.surface.fill(BG_COLOR)
        draw_axis(self.surface, self.bounds.padding)

        coords = [p.get_coordinates() for p in points]
        if len(coords) > 1:
            pygame.draw.lines(self.surface, LINE_COLOR, False, coords, 1)
        for x, y in coords:
            draw_marker(self.surface, x, y, self.bounds.radius)
        self.frames += 1
