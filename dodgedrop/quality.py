"""Automatic render quality switching driven by FPS samples."""

from __future__ import annotations

from enum import Enum

LOW_FPS = 30.0
HIGH_FPS = 40.0
LOW_AFTER_SAMPLES = 1
HIGH_AFTER_SAMPLES = 2


class QualityLevel(Enum):
    HIGH = "high"
    LOW = "low"


class Quality:
    """Drops to LOW quickly on poor FPS and recovers to HIGH after sustained good FPS."""

    def __init__(self, start: QualityLevel = QualityLevel.HIGH) -> None:
        self._level = start
        self._low_count = 0
        self._high_count = 0

    def reset(self, start: QualityLevel = QualityLevel.HIGH) -> None:
        """Set the level and forget any streaks."""
        self._level = start
        self._low_count = 0
        self._high_count = 0

    def force(self, level: QualityLevel) -> None:
        """Set the level directly, clearing streaks."""
        self._level = level
        self._low_count = 0
        self._high_count = 0

    def update_on_fps_sample(self, fps: float) -> None:
        """Feed one averaged FPS sample (expected about once per second)."""
        if fps < LOW_FPS:
            self._low_count += 1
            self._high_count = 0
            if self._level is QualityLevel.HIGH and self._low_count >= LOW_AFTER_SAMPLES:
                self._level = QualityLevel.LOW
            return

        if fps > HIGH_FPS:
            self._high_count += 1
            self._low_count = 0
            if self._level is QualityLevel.LOW and self._high_count >= HIGH_AFTER_SAMPLES:
                self._level = QualityLevel.HIGH
            return

        # Samples between the thresholds break both streaks.
        self._low_count = 0
        self._high_count = 0

    @property
    def level(self) -> QualityLevel:
        """The current quality level."""
        return self._level