"""Wall-clock time and frame timing."""

from __future__ import annotations

import math
import time
from typing import Callable

_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)


def _saturate_i32(value: float) -> int:
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


class Clock:
    """Tracks elapsed time since start and the duration of the last frame."""

    def __init__(
        self,
        now: Callable[[], float] = time.monotonic,
        frame_time: float = 1.0 / 60.0,
    ) -> None:
        self._now = now
        self.start_time = now()
        self.frame_time = frame_time

    def get_fps(self) -> int:
        """Frames per second derived from the last frame's duration."""
        if self.frame_time == 0.0:
            return _I32_MAX
        return _saturate_i32(1.0 / self.frame_time)

    def get_frame_time(self) -> float:
        """Duration in seconds of the last frame."""
        return self.frame_time

    def get_time(self) -> float:
        """Seconds elapsed since the clock was created."""
        return self._now() - self.start_time

    def tick(self, frame_time: float) -> None:
        """Record the duration of the frame just finished."""
        if frame_time < 0.0:
            raise ValueError("frame time cannot be negative")
        self.frame_time = frame_time