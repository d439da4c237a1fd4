"""Screen-shake camera offset."""

from __future__ import annotations

import random


class Camera2D:
    """Produces a decaying random offset after a shake is requested."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._offset_x = 0.0
        self._offset_y = 0.0
        self._shake_time = 0.0
        self._shake_duration = 0.0
        self._shake_strength = 0.0

    def reset(self) -> None:
        """Stop any shake and zero the offset."""
        self._offset_x = 0.0
        self._offset_y = 0.0
        self._shake_time = 0.0
        self._shake_duration = 0.0
        self._shake_strength = 0.0

    def add_shake(self, strength_px: float, time_sec: float) -> None:
        """Start or extend a shake; a weaker or shorter one never cuts a stronger one."""
        if time_sec > self._shake_duration - self._shake_time:
            self._shake_duration = time_sec
            self._shake_time = 0.0
        if strength_px > self._shake_strength:
            self._shake_strength = strength_px

    def _roll(self, strength: float) -> int:
        span = max(int(strength * 2), 0)
        return self._rng.randint(0, span) - int(strength)

    def update(self, dt: float) -> None:
        """Advance the shake and pick a new offset."""
        if self._shake_time >= self._shake_duration:
            self._offset_x = self._offset_y = 0.0
            return

        self._shake_time += dt
        t = 1.0 if self._shake_duration <= 0.0 else self._shake_time / self._shake_duration
        strength = self._shake_strength * (1.0 - t)

        self._offset_x = float(self._roll(strength))
        self._offset_y = float(self._roll(strength))

        if self._shake_time >= self._shake_duration:
            self._offset_x = self._offset_y = 0.0
            self._shake_strength = 0.0

    @property
    def offset_x(self) -> int:
        """Horizontal offset in whole pixels."""
        return int(self._offset_x)

    @property
    def offset_y(self) -> int:
        """Vertical offset in whole pixels."""
        return int(self._offset_y)