"""Repeating timers with cancel handles.

The scheduler never sleeps or spawns threads. A timer is driven by whoever
owns the main loop: a pygame frame loop feeds ``FrameTimer.advance`` with the
milliseconds elapsed since the previous frame, and tests feed it directly.
"""

from __future__ import annotations

import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class TimerHandle:
    """Cancel handle for one scheduled callback."""

    __slots__ = ("interval_ms", "callback", "elapsed_ms", "_cancelled")

    def __init__(self, interval_ms: float, callback: Callable[[], None]) -> None:
        self.interval_ms = interval_ms
        self.callback = callback
        self.elapsed_ms = 0.0
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class Timer(Protocol):
    def schedule(
        self, interval_ms: float, callback: Callable[[], None]
    ) -> TimerHandle: ...


class FrameTimer:
    """Fires repeating callbacks from elapsed time reported by the host loop."""

    def __init__(self) -> None:
        self._handles: list[TimerHandle] = []

    @property
    def pending(self) -> int:
        return sum(1 for h in self._handles if not h.cancelled)

    def schedule(
        self, interval_ms: float, callback: Callable[[], None]
    ) -> TimerHandle:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        handle = TimerHandle(interval_ms, callback)
        self._handles.append(handle)
        logger.debug("Scheduled timer every %sms", interval_ms)
        return handle

    def advance(self, elapsed_ms: float) -> int:
        """Account for ``elapsed_ms`` and fire every due callback.

        A handle that falls several intervals behind fires once per missed
        interval. Returns the number of callbacks fired.
        """
        fired = 0
        for handle in list(self._handles):
            if handle.cancelled:
                continue
            handle.elapsed_ms += elapsed_ms
            while handle.elapsed_ms >= handle.interval_ms and not handle.cancelled:
                handle.elapsed_ms -= handle.interval_ms
                handle.callback()
                fired += 1
        self._handles = [h for h in self._handles if not h.cancelled]
        return fired

    def cancel_all(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles.clear()
