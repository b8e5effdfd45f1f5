"""Chart configuration and the coordinate bounds derived from the canvas."""

from __future__ import annotations

from dataclasses import dataclass

from tick_chart.easing import EASINGS
from tick_chart.types import ConfigurationError

AXIS_PADDING = 40
POINT_RADIUS = 5

DEFAULT_MIN_POINTS = 2
DEFAULT_MAX_POINTS = 10
DEFAULT_STEPS = 30
DEFAULT_TOTAL_TIME_MS = 900


@dataclass(frozen=True)
class ChartConfig:
    """Immutable animation parameters.

    Attributes:
        min_points: Smallest number of points in a generated dataset.
        max_points: Largest number of points in a generated dataset.
        steps: Ticks per transition.
        total_time_ms: Target duration of a whole transition.
        easing: Name of the easing curve applied to every point.
    """

    min_points: int = DEFAULT_MIN_POINTS
    max_points: int = DEFAULT_MAX_POINTS
    steps: int = DEFAULT_STEPS
    total_time_ms: int = DEFAULT_TOTAL_TIME_MS
    easing: str = "linear"

    def __post_init__(self) -> None:
        for name in ("min_points", "max_points", "steps", "total_time_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
        if self.min_points < 1:
            raise ConfigurationError("min_points must be at least 1")
        if self.max_points < self.min_points:
            raise ConfigurationError(
                f"max_points ({self.max_points}) must not be less than "
                f"min_points ({self.min_points})"
            )
        if self.steps < 1:
            raise ConfigurationError("steps must be positive")
        if self.total_time_ms < 1:
            raise ConfigurationError("total_time_ms must be positive")
        if self.easing not in EASINGS:
            raise ConfigurationError(f"Unknown easing {self.easing!r}")

    @property
    def step_time(self) -> int:
        """Milliseconds between two ticks, rounded half up."""
        return max(1, (2 * self.total_time_ms + self.steps) // (2 * self.steps))


@dataclass(frozen=True)
class PointBounds:
    """Valid point coordinates for a canvas.

    Screen y grows downward, so ``min_y`` is the baseline a zero value sits
    on and ``max_y`` is the largest height a value may reach above it.
    """

    width: int
    height: int
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    padding: int = AXIS_PADDING
    radius: int = POINT_RADIUS

    @classmethod
    def from_canvas(
        cls,
        width: int,
        height: int,
        padding: int = AXIS_PADDING,
        radius: int = POINT_RADIUS,
    ) -> PointBounds:
        bounds = cls(
            width=width,
            height=height,
            min_x=padding * 2,
            max_x=width - padding * 2,
            min_y=height - padding - radius,
            max_y=height - padding * 2 - radius * 2,
            padding=padding,
            radius=radius,
        )
        if bounds.max_x <= bounds.min_x or bounds.max_y < 0:
            raise ConfigurationError(
                f"Canvas {width}x{height} is too small for padding {padding}"
            )
        return bounds

    @property
    def workspace_x(self) -> int:
        return self.max_x - self.min_x
