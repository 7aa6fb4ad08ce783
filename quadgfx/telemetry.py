"""Frame profiling: nested timing zones, logged strings and capture requests."""

from __future__ import annotations

import copy
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator


@dataclass
class Zone:
    """A named, timed section of a frame, possibly holding nested zones."""

    name: str
    start_time: float
    duration: float = 0.0
    children: list[Zone] = field(default_factory=list)


@dataclass
class Frame:
    """The zones recorded during one frame and the frame's full duration."""

    full_frame_time: float = 0.0
    zones: list[Zone] = field(default_factory=list)
    _active: list[Zone] = field(default_factory=list, repr=False, compare=False)

    @property
    def has_open_zone(self) -> bool:
        return bool(self._active)

    def try_clone(self) -> Frame | None:
        """Return a deep copy, or None while a zone is still open."""
        if self._active:
            return None
        return Frame(self.full_frame_time, copy.deepcopy(self.zones))


class Profiler:
    """Collects per-frame zones; enabling and capture requests apply on reset."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._frame = Frame()
        self._prev_frame = Frame()
        self.enabled = False
        self._enable_request: bool | None = None
        self._capture_request = False
        self.capturing = False
        self._strings: list[str] = []

    def enable(self) -> None:
        """Request profiling to start with the next frame."""
        self._enable_request = True

    def disable(self) -> None:
        """Request profiling to stop with the next frame."""
        self._enable_request = False

    def begin_zone(self, name: str) -> None:
        """Open a zone nested in the currently open one."""
        if not self.enabled:
            return
        active = self._frame._active
        siblings = active[-1].children if active else self._frame.zones
        zone = Zone(name, self._now())
        siblings.append(zone)
        active.append(zone)

    def end_zone(self) -> None:
        """Close the innermost open zone and record its duration."""
        if not self.enabled:
            return
        active = self._frame._active
        if not active:
            raise RuntimeError("end_zone called without begin_zone")
        zone = active.pop()
        zone.duration = self._now() - zone.start_time

    @contextmanager
    def zone(self, name: str) -> Iterator[None]:
        """Time the body of a with-block as a zone."""
        self.begin_zone(name)
        try:
            yield
        finally:
            self.end_zone()

    def reset(self, frame_time: float) -> None:
        """Finish the current frame and start a new one."""
        if self._frame._active:
            raise RuntimeError("New frame started with unpaired begin/end zones.")
        self._frame.full_frame_time = frame_time
        self._prev_frame = self._frame
        self._frame = Frame()

        if self._enable_request is not None:
            self.enabled = self._enable_request
            self._enable_request = None

        if self.capturing:
            self.capturing = False

        if self._capture_request:
            self.capturing = True
            self._capture_request = False

    def frame(self) -> Frame:
        """Return a copy of the last completed frame."""
        return Frame(self._prev_frame.full_frame_time, copy.deepcopy(self._prev_frame.zones))

    def log_string(self, string: str) -> None:
        """Append a message to the telemetry log."""
        self._strings.append(string)

    @contextmanager
    def log_time(self, name: str) -> Iterator[None]:
        """Log how long the body of a with-block took."""
        start = self._now()
        try:
            yield
        finally:
            self.log_string(f"Time query: {name}, {self._now() - start:.1f}s")

    def strings(self) -> list[str]:
        """Return a copy of the logged messages."""
        return list(self._strings)

    def capture_frame(self) -> None:
        """Request that the next frame be captured."""
        self._capture_request = True