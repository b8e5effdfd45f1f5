"""AnimationClock - step counter for one transition."""


class AnimationClock:
    def __init__(self, steps: int, step_time: int) -> None:
        if steps <= 0:
            raise ValueError("steps must be positive")
        if step_time <= 0:
            raise ValueError("step_time must be positive")
        self._steps = steps
        self._step_time = step_time
        self._step = 0

    @property
    def steps(self) -> int:
        return self._steps

    @property
    def step_time(self) -> int:
        return self._step_time

    @property
    def step(self) -> int:
        return self._step

    @property
    def done(self) -> bool:
        return self._step >= self._steps

    def advance(self) -> int:
        self._step += 1
        return self._step

    def reset(self, steps: int | None = None, step_time: int | None = None) -> None:
        """Rewind to step 0, optionally with a new step count and interval."""
        if steps is not None:
            if steps <= 0:
                raise ValueError("steps must be positive")
            self._steps = steps
        if step_time is not None:
            if step_time <= 0:
                raise ValueError("step_time must be positive")
            self._step_time = step_time
        self._step = 0
