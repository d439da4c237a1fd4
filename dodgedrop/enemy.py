"""Falling enemies and the spawner that paces them."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, auto

import pygame

from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.geometry import Entity, Vec2
from dodgedrop.quality import QualityLevel
from dodgedrop.render import draw_box, draw_glow_box

BASE_FALL_SPEED = 260.0
FALL_SPEED_PER_SEC = 8.0
BASE_INTERVAL = 0.45
INTERVAL_DECAY_PER_SEC = 0.01
MIN_INTERVAL = 0.18
DESPAWN_MARGIN = 80.0


class EnemyType(Enum):
    SMALL = auto()
    MID = auto()
    LARGE = auto()


_SIZES = {
    EnemyType.SMALL: (24.0, 24.0),
    EnemyType.MID: (40.0, 40.0),
    EnemyType.LARGE: (64.0, 32.0),
}

_COLORS = {
    EnemyType.SMALL: ((255, 90, 120), (255, 220, 230)),
    EnemyType.MID: ((255, 160, 80), (255, 235, 210)),
    EnemyType.LARGE: ((170, 90, 255), (230, 220, 255)),
}

_INNER_EDGE = (20, 20, 20)


def size_for_type(enemy_type: EnemyType) -> Vec2:
    """Return the box size used for an enemy type."""
    w, h = _SIZES[enemy_type]
    return Vec2(w, h)


@dataclass
class Enemy(Entity):
    """An enemy box falling straight down."""

    fall_speed: float = BASE_FALL_SPEED
    enemy_type: EnemyType = EnemyType.SMALL

    def update(self, dt: float) -> None:
        """Fall, and die once well below the screen."""
        self.pos.y += self.fall_speed * dt
        if self.pos.y > SCREEN_H + DESPAWN_MARGIN:
            self.alive = False

    def draw(
        self,
        surface: pygame.Surface,
        quality: QualityLevel,
        offset_x: int = 0,
        offset_y: int = 0,
    ) -> None:
        """Draw the enemy with glow, fill and edges."""
        x1 = int(self.pos.x + offset_x)
        y1 = int(self.pos.y + offset_y)
        x2 = int(self.pos.x + self.size.x + offset_x)
        y2 = int(self.pos.y + self.size.y + offset_y)
        fill, edge = _COLORS[self.enemy_type]

        draw_glow_box(surface, x1, y1, x2, y2, fill, quality)
        draw_box(surface, x1, y1, x2, y2, fill, True)
        draw_box(surface, x1, y1, x2, y2, edge, False)
        draw_box(surface, x1 + 2, y1 + 2, x2 - 2, y2 - 2, _INNER_EDGE, False)


class EnemySpawner:
    """Decides when enemies appear, their type, position and speed."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._timer = 0.0
        self._interval = BASE_INTERVAL
        self._fall_speed = BASE_FALL_SPEED
        self.reset()

    def reset(self) -> None:
        """Return to the starting pace."""
        self._timer = 0.0
        self._interval = BASE_INTERVAL
        self._fall_speed = BASE_FALL_SPEED

    def update_and_should_spawn(self, dt: float, time_sec: float) -> bool:
        """Advance by dt at play time time_sec; True when an enemy should spawn."""
        self._fall_speed = BASE_FALL_SPEED + time_sec * FALL_SPEED_PER_SEC
        self._interval = max(MIN_INTERVAL, BASE_INTERVAL - time_sec * INTERVAL_DECAY_PER_SEC)

        self._timer += dt
        if self._timer >= self._interval:
            self._timer -= self._interval
            return True
        return False

    @property
    def fall_speed(self) -> float:
        """Fall speed for enemies spawned now."""
        return self._fall_speed

    def roll_type(self) -> EnemyType:
        """Pick a type: 55% small, 30% mid, 15% large."""
        r = self._rng.randint(0, 99)
        if r < 55:
            return EnemyType.SMALL
        if r < 85:
            return EnemyType.MID
        return EnemyType.LARGE

    def roll_spawn_x(self, enemy_w: float) -> float:
        """Pick a left edge so the enemy fits on screen."""
        max_x = SCREEN_W - int(enemy_w)
        return float(self._rng.randint(0, max_x))