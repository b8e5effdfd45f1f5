"""Easing curves mapping a tick fraction to animation progress.

Every curve takes the fraction of ticks elapsed, ``t`` in ``[0, 1]``, and
returns the fraction of the distance covered. All curves start at 0 and end
at exactly 1, so a point always lands on its target on the final tick.
"""

from __future__ import annotations

from typing import Callable

from tick_chart.types import ConfigurationError

Easing = Callable[[float], float]


def linear(t: float) -> float:
    """Constant speed: every tick moves a point by the same delta."""
    return t


def ease_in(t: float) -> float:
    """Points leave the old dataset slowly and speed up into the new one."""
    return t ** 2


def ease_out(t: float) -> float:
    """Points jump toward the new dataset and slow down as they settle."""
    return 1 - (1 - t) ** 2


def ease_in_out(t: float) -> float:
    """Smoothstep: zero speed at both the old and the new dataset."""
    return t * t * (3 - 2 * t)


EASINGS: dict[str, Easing] = {
    "linear": linear,
    "ease_in": ease_in,
    "ease_out": ease_out,
    "ease_in_out": ease_in_out,
}

EASING_NAMES = list(EASINGS)


def get_easing(name: str) -> Easing:
    try:
        return EASINGS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown easing {name!r}, expected one of {', '.join(EASING_NAMES)}"
        ) from None
