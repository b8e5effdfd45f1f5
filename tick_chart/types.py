"""Shared types and errors for tick-chart."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Callable, Sequence

if TYPE_CHECKING:
    from tick_chart.point import Point


class ChartState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class ChartError(Exception):
    """Base class for tick-chart errors."""


class ConfigurationError(ChartError, ValueError):
    """Raised on non-numeric or out-of-range chart parameters."""


class InvalidPointCount(ChartError, ValueError):
    """Raised when resampling a sequence with no points."""

    def __init__(self, old_count: int, new_count: int) -> None:
        self.old_count = old_count
        self.new_count = new_count
        super().__init__(
            f"Cannot resample {old_count} point(s) onto {new_count} point(s)"
        )


Renderer = Callable[[Sequence["Point"]], None]
