"""Resampling - correlate an old point sequence with a new one."""

from __future__ import annotations

import logging
from typing import Sequence

from tick_chart.point import Point
from tick_chart.types import InvalidPointCount

logger = logging.getLogger(__name__)


def source_index(index: int, length: int, other_length: int) -> int:
    """Map ``index`` in a sequence of ``length`` onto one of ``other_length``.

    Equivalent to ``floor(index / (length / other_length))``, computed in
    integers.
    """
    return index * other_length // length


def resample(
    old_points: Sequence[Point],
    new_points: Sequence[Point],
    steps: int | None = None,
) -> list[Point]:
    """Build the working sequence that morphs ``old_points`` into ``new_points``.

    Growing (fewer old points than new): each new point starts at the old
    point it maps to and animates toward its own generated position. The
    result has ``len(new_points)`` points.

    Shrinking or equal: every old point is kept and aimed at the new point
    it maps to, so several old points may converge onto one new point. The
    result has ``len(old_points)`` points.
    """
    old_count = len(old_points)
    new_count = len(new_points)
    if old_count == 0 or new_count == 0:
        raise InvalidPointCount(old_count, new_count)

    if old_count < new_count:
        working = []
        for j, point in enumerate(new_points):
            source = old_points[source_index(j, new_count, old_count)]
            end = point.get_coordinates()
            point.animate(source.get_coordinates(), end, steps)
            working.append(point)
        logger.debug("Resampled %d -> %d points (growing)", old_count, new_count)
        return working

    working = []
    for i, point in enumerate(old_points):
        destination = new_points[source_index(i, old_count, new_count)]
        x, y = destination.get_coordinates()
        point.set_target_coordinates(x, y, steps)
        working.append(point)
    logger.debug("Resampled %d -> %d points (shrinking)", old_count, new_count)
    return working
