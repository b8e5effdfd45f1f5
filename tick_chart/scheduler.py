"""AnimationScheduler - drives one transition at a time and owns chart state."""

from __future__ import annotations

import logging
import os
import random
from typing import Callable, Sequence

from tick_chart.clock import AnimationClock
from tick_chart.config import ChartConfig, PointBounds
from tick_chart.generator import generate_points
from tick_chart.point import Point
from tick_chart.resample import resample
from tick_chart.timers import Timer, TimerHandle
from tick_chart.types import ChartState, Renderer

logger = logging.getLogger(__name__)

CompleteHook = Callable[[Sequence[Point]], None]


class AnimationScheduler:
    """Morphs the current dataset into a freshly generated one.

    While RUNNING the scheduler is the only writer of the working sequence.
    Requests arriving in that state are dropped, and configuration changes
    wait for the next transition.
    """

    def __init__(
        self,
        bounds: PointBounds,
        timer: Timer,
        config: ChartConfig | None = None,
        seed: int | None = None,
    ) -> None:
        self._bounds = bounds
        self._timer = timer
        self._config = config if config is not None else ChartConfig()
        self._clock = AnimationClock(self._config.steps, self._config.step_time)
        self._render_hooks: list[Renderer] = []
        self._complete_hooks: list[CompleteHook] = []
        self._handle: TimerHandle | None = None

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._current: list[Point] = generate_points(self._config, bounds, self._rng)
        self._working: list[Point] = []
        self._destination: list[Point] = []

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def bounds(self) -> PointBounds:
        return self._bounds

    @property
    def clock(self) -> AnimationClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def state(self) -> ChartState:
        return ChartState.RUNNING if self._handle is not None else ChartState.IDLE

    @property
    def running(self) -> bool:
        return self._handle is not None

    @property
    def step(self) -> int:
        return self._clock.step

    @property
    def current_points(self) -> tuple[Point, ...]:
        return tuple(self._current)

    @property
    def working_points(self) -> tuple[Point, ...]:
        return tuple(self._working)

    def on_render(self, hook: Renderer) -> None:
        self._render_hooks.append(hook)

    def on_complete(self, hook: CompleteHook) -> None:
        self._complete_hooks.append(hook)

    def configure(self, config: ChartConfig) -> None:
        """Use ``config`` from the next transition on."""
        self._config = config
        logger.info(
            "Configured %d-%d points, %d steps every %dms",
            config.min_points,
            config.max_points,
            config.steps,
            config.step_time,
        )

    def render(self) -> None:
        """Draw the current dataset."""
        self._emit_render(self._current)

    def animated_change(self, config: ChartConfig | None = None) -> bool:
        """Start a transition to a new random dataset.

        Returns False if a transition is already running, in which case
        nothing changes apart from the configuration.
        """
        if config is not None:
            self.configure(config)
        if self.running:
            logger.debug("Transition request dropped at step %d", self._clock.step)
            return False

        config = self._config
        destination = generate_points(config, self._bounds, self._rng)
        working = resample(self._current, destination, config.steps)
        for point in working:
            point.easing = config.easing

        self._clock.reset(config.steps, config.step_time)
        self._working = working
        self._destination = destination
        self._handle = self._timer.schedule(self._clock.step_time, self.tick)
        logger.info(
            "Animating %d -> %d points over %d steps (%dms each)",
            len(self._current),
            len(destination),
            config.steps,
            config.step_time,
        )
        return True

    def tick(self) -> None:
        if not self.running:
            return

        self._clock.advance()
        for point in self._working:
            point.move()
        self._emit_render(self._working)

        if self._clock.done:
            self._finish()

    def close(self) -> None:
        """Cancel a pending transition and keep the current dataset.

        Current points already moved by the cancelled transition are put back
        where it started them. Completion hooks do not fire.
        """
        if not self.running:
            return
        logger.info("Transition cancelled at step %d", self._clock.step)
        self._handle.cancel()
        self._handle = None
        self._clock.reset()

        for point in self._current:
            point.rewind()
        self._working = []
        self._destination = []

    def _finish(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._clock.reset()

        for point in self._destination:
            point.settle()
        self._current = self._destination
        self._working = []
        self._destination = []
        logger.info("Transition finished with %d points", len(self._current))

        for hook in self._complete_hooks:
            hook(self._current)

    def _emit_render(self, points: Sequence[Point]) -> None:
        for hook in self._render_hooks:
            hook(points)
