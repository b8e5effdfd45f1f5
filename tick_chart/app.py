"""Chart application - wires user input into the animation scheduler.

Controls:
  Click / Space  New random dataset
  +/-            Adjust animation steps (applies to the next transition)
  E              Cycle easing curve
  Esc            Quit
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from typing import Mapping, Sequence

import pygame

from tick_chart.config import ChartConfig, PointBounds
from tick_chart.easing import EASING_NAMES
from tick_chart.point import Point
from tick_chart.render import PygameRenderer
from tick_chart.scheduler import AnimationScheduler
from tick_chart.timers import FrameTimer
from tick_chart.types import ConfigurationError, Renderer

logger = logging.getLogger(__name__)

FPS = 60
CANVAS_W = 800
CANVAS_H = 500
STEPS_INCREMENT = 10

# Form field name -> ChartConfig attribute
_INT_FIELDS = {
    "min_points": "min_points",
    "max_points": "max_points",
    "steps": "steps",
    "time": "total_time_ms",
}


def parse_parameters(form: Mapping[str, str], previous: ChartConfig) -> ChartConfig:
    """Build a new config from submitted form fields.

    Missing fields keep their previous value. Raises ConfigurationError on
    non-numeric input or an invalid combination of values.
    """
    changes: dict[str, object] = {}
    for key, attr in _INT_FIELDS.items():
        raw = form.get(key)
        if raw is None:
            continue
        text = str(raw).strip()
        digits = text[1:] if text.startswith(("+", "-")) else text
        if not (digits.isascii() and digits.isdigit()):
            raise ConfigurationError(f"{key} must be a whole number, got {raw!r}")
        changes[attr] = int(text)
    if form.get("easing") is not None:
        changes["easing"] = str(form["easing"]).strip()
    return dataclasses.replace(previous, **changes)


class ChartApp:
    """Holds the scheduler and translates user actions into transitions."""

    def __init__(
        self,
        width: int = CANVAS_W,
        height: int = CANVAS_H,
        config: ChartConfig | None = None,
        seed: int | None = None,
        renderer: Renderer | None = None,
    ) -> None:
        self.bounds = PointBounds.from_canvas(width, height)
        self.timer = FrameTimer()
        self.scheduler = AnimationScheduler(self.bounds, self.timer, config, seed)
        self.transitions = 0
        self.rejected = 0

        if renderer is not None:
            self.scheduler.on_render(renderer)
        self.scheduler.on_complete(self._on_complete)

    @property
    def config(self) -> ChartConfig:
        return self.scheduler.config

    def _on_complete(self, points: Sequence[Point]) -> None:
        self.transitions += 1

    def click(self) -> bool:
        return self.scheduler.animated_change()

    def submit(self, form: Mapping[str, str]) -> bool:
        """Apply submitted parameters and request a new dataset.

        Invalid parameters are logged and discarded; the previous
        configuration stays in effect and the dataset still changes.
        """
        try:
            config = parse_parameters(form, self.scheduler.config)
        except ConfigurationError as exc:
            self.rejected += 1
            logger.warning("Ignoring parameters: %s", exc)
            config = None
        return self.scheduler.animated_change(config)

    def adjust_steps(self, delta: int) -> bool:
        steps = max(1, self.config.steps + delta)
        return self.submit({"steps": str(steps)})

    def cycle_easing(self) -> bool:
        index = EASING_NAMES.index(self.config.easing)
        return self.submit({"easing": EASING_NAMES[(index + 1) % len(EASING_NAMES)]})

    def update(self, elapsed_ms: float) -> int:
        return self.timer.advance(elapsed_ms)

    def close(self) -> None:
        self.scheduler.close()
        self.timer.cancel_all()


def run_headless(app: ChartApp, transitions: int) -> None:
    """Run ``transitions`` back-to-back transitions on simulated time."""
    app.scheduler.render()
    for _ in range(transitions):
        app.click()
        while app.scheduler.running:
            app.update(app.config.step_time)


def run_window(app: ChartApp) -> None:
    clock = pygame.time.Clock()
    app.scheduler.render()
    running = True

    while running:
        elapsed_ms = clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                app.click()

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    app.click()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    app.adjust_steps(STEPS_INCREMENT)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    app.adjust_steps(-STEPS_INCREMENT)
                elif event.key == pygame.K_e:
                    app.cycle_easing()

        app.update(elapsed_ms)
        pygame.display.flip()

    app.close()


def build_parser() -> argparse.ArgumentParser:
    defaults = ChartConfig()
    parser = argparse.ArgumentParser(
        description="Animated line chart of random data",
    )
    parser.add_argument(
        "--min-points", type=int, default=defaults.min_points,
        help=f"Fewest points per dataset (default: {defaults.min_points})",
    )
    parser.add_argument(
        "--max-points", type=int, default=defaults.max_points,
        help=f"Most points per dataset (default: {defaults.max_points})",
    )
    parser.add_argument(
        "--steps", type=int, default=defaults.steps,
        help=f"Ticks per transition (default: {defaults.steps})",
    )
    parser.add_argument(
        "--time", type=int, default=defaults.total_time_ms,
        help=f"Transition duration in ms (default: {defaults.total_time_ms})",
    )
    parser.add_argument(
        "--easing", choices=EASING_NAMES, default=defaults.easing,
        help=f"Easing curve (default: {defaults.easing})",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--width", type=int, default=CANVAS_W)
    parser.add_argument("--height", type=int, default=CANVAS_H)
    parser.add_argument(
        "--headless", action="store_true",
        help="Render off-screen instead of opening a window",
    )
    parser.add_argument(
        "--transitions", type=int, default=1,
        help="Transitions to run in headless mode (default: 1)",
    )
    parser.add_argument(
        "--output", default=None,
        help="Save the final headless frame to this image file",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ChartConfig(
            min_points=args.min_points,
            max_points=args.max_points,
            steps=args.steps,
            total_time_ms=args.time,
            easing=args.easing,
        )
        bounds = PointBounds.from_canvas(args.width, args.height)
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    if args.headless:
        surface = pygame.Surface((bounds.width, bounds.height))
        app = ChartApp(
            bounds.width, bounds.height, config, args.seed, PygameRenderer(surface, bounds)
        )
        run_headless(app, args.transitions)
        if args.output:
            pygame.image.save(surface, args.output)
        print(f"{app.transitions} transition(s), seed {app.scheduler.seed}")
        return 0

    pygame.init()
    try:
        surface = pygame.display.set_mode((bounds.width, bounds.height))
        pygame.display.set_caption("tick-chart")
        app = ChartApp(
            bounds.width, bounds.height, config, args.seed, PygameRenderer(surface, bounds)
        )
        run_window(app)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
