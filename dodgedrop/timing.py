"""Frame delta timing and a once-per-second FPS sampler."""

from __future__ import annotations

import time
from typing import Callable

Clock = Callable[[], int]

MAX_DELTA_SEC = 0.25
DEFAULT_FPS = 60.0
SAMPLE_WINDOW_MS = 1000


def _monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000


class FrameTimer:
    """Measures seconds between frames, clamped to guard against long stalls."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or _monotonic_ms
        self._prev_ms = 0
        self._delta = 0.0
        self._total = 0.0
        self.reset()

    def reset(self) -> None:
        """Restart timing from the current clock reading."""
        self._prev_ms = self._clock()
        self._delta = 0.0
        self._total = 0.0

    def update(self) -> None:
        """Take a new reading and compute the time since the previous one."""
        now = self._clock()
        diff = now - self._prev_ms
        self._prev_ms = now
        # Clamping the upper end keeps a window switch from teleporting objects.
        self._delta = min(max(diff / 1000.0, 0.0), MAX_DELTA_SEC)
        self._total += self._delta

    @property
    def delta_time(self) -> float:
        """Seconds elapsed in the last update."""
        return self._delta

    @property
    def total_time(self) -> float:
        """Sum of all deltas since the last reset."""
        return self._total


class FpsCounter:
    """Averages frames per second over windows of about one second."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or _monotonic_ms
        self._prev_ms = 0
        self._acc_ms = 0
        self._frames = 0
        self._fps = DEFAULT_FPS
        self.reset()

    def reset(self) -> None:
        """Start a fresh sampling window."""
        self._prev_ms = self._clock()
        self._acc_ms = 0
        self._frames = 0
        self._fps = DEFAULT_FPS

    def update(self) -> bool:
        """Count one frame; return True when a new FPS value was computed."""
        now = self._clock()
        diff = now - self._prev_ms
        self._prev_ms = now

        self._acc_ms += diff
        self._frames += 1

        if self._acc_ms < SAMPLE_WINDOW_MS:
            return False

        seconds = self._acc_ms / 1000.0
        self._fps = self._frames / seconds if seconds > 0.0 else DEFAULT_FPS
        self._acc_ms = 0
        self._frames = 0
        return True

    @property
    def fps(self) -> float:
        """The most recent FPS sample."""
        return self._fps