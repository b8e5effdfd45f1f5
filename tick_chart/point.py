"""Point - a chart marker that interpolates toward a target position."""

from __future__ import annotations

from dataclasses import dataclass, field

from tick_chart.config import DEFAULT_STEPS
from tick_chart.easing import get_easing


@dataclass(eq=False)
class Point:
    """A 2D position with an optional target to animate toward.

    Each assignment of a position or target starts a new leg: the current
    position is recorded as the leg's start and the tick counter is reset.
    ``move()`` then evaluates the leg at ``tick / steps``, so the point lands
    exactly on its target after ``steps`` ticks.
    """

    x: float | None
    y: float | None
    target_x: float | None = None
    target_y: float | None = None
    steps: int = DEFAULT_STEPS
    easing: str = "linear"
    start_x: float | None = field(default=None, init=False, repr=False)
    start_y: float | None = field(default=None, init=False, repr=False)
    tick: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.steps < 1:
            raise ValueError("steps must be positive")
        get_easing(self.easing)
        self._begin_leg()

    @property
    def step_x(self) -> float:
        if self.target_x is None or self.start_x is None:
            return 0.0
        return (self.target_x - self.start_x) / self.steps

    @property
    def step_y(self) -> float:
        if self.target_y is None or self.start_y is None:
            return 0.0
        return (self.target_y - self.start_y) / self.steps

    @property
    def has_target(self) -> bool:
        return self.target_x is not None and self.target_y is not None

    @property
    def at_target(self) -> bool:
        if not self.has_target:
            return True
        return self.x == self.target_x and self.y == self.target_y

    def get_coordinates(self) -> tuple[float | None, float | None]:
        return self.x, self.y

    def set_coordinates(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        self._begin_leg()

    def set_target_coordinates(
        self, x: float, y: float, steps: int | None = None
    ) -> None:
        if steps is not None:
            if steps < 1:
                raise ValueError("steps must be positive")
            self.steps = steps
        self.target_x = x
        self.target_y = y
        self._begin_leg()

    def swap_coordinates(self) -> None:
        """Exchange the current position with the target position."""
        self.x, self.target_x = self.target_x, self.x
        self.y, self.target_y = self.target_y, self.y
        self._begin_leg()

    def animate(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        steps: int | None = None,
    ) -> None:
        """Place the point at ``start`` and aim it at ``end``."""
        self.x, self.y = start
        self.set_target_coordinates(end[0], end[1], steps)

    def move(self) -> None:
        """Advance one tick along the current leg."""
        if not self.has_target or self.start_x is None or self.start_y is None:
            return
        if self.tick >= self.steps:
            return

        self.tick += 1
        if self.tick == self.steps:
            self.x = self.target_x
            self.y = self.target_y
            return

        progress = get_easing(self.easing)(self.tick / self.steps)
        self.x = self.start_x + (self.target_x - self.start_x) * progress
        self.y = self.start_y + (self.target_y - self.start_y) * progress

    def settle(self) -> None:
        """Snap onto the target and drop it."""
        if self.has_target:
            self.x = self.target_x
            self.y = self.target_y
        self.target_x = None
        self.target_y = None
        self._begin_leg()

    def rewind(self) -> None:
        """Return to the start of the current leg and drop the target."""
        if self.start_x is not None and self.start_y is not None:
            self.x = self.start_x
            self.y = self.start_y
        self.target_x = None
        self.target_y = None
        self._begin_leg()

    def _begin_leg(self) -> None:
        self.start_x = self.x
        self.start_y = self.y
        self.tick = 0
