"""tick-chart - Animated line chart that morphs between random datasets."""

from tick_chart.clock import AnimationClock
from tick_chart.config import ChartConfig, PointBounds
from tick_chart.generator import generate_points
from tick_chart.point import Point
from tick_chart.resample import resample
from tick_chart.scheduler import AnimationScheduler
from tick_chart.timers import FrameTimer, TimerHandle
from tick_chart.types import (
    ChartError,
    ChartState,
    ConfigurationError,
    InvalidPointCount,
)

__all__ = [
    "AnimationScheduler",
    "AnimationClock",
    "ChartConfig",
    "PointBounds",
    "Point",
    "resample",
    "generate_points",
    "FrameTimer",
    "TimerHandle",
    "ChartState",
    "ChartError",
    "ConfigurationError",
    "InvalidPointCount",
]
