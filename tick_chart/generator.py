"""Random dataset generation."""

from __future__ import annotations

import random

from tick_chart.config import ChartConfig, PointBounds
from tick_chart.point import Point


def generate_points(
    config: ChartConfig, bounds: PointBounds, rng: random.Random
) -> list[Point]:
    """Return between ``min_points`` and ``max_points`` evenly spaced points.

    Values are drawn uniformly from ``[0, bounds.max_y]`` and plotted upward
    from the baseline.
    """
    count = rng.randint(config.min_points, config.max_points)
    gap = bounds.workspace_x // (count - 1) if count > 1 else 0
    return [
        Point(
            bounds.min_x + gap * i,
            bounds.min_y - rng.randint(0, bounds.max_y),
            steps=config.steps,
            easing=config.easing,
        )
        for i in range(count)
    ]
