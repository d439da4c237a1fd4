import random

import pygame
import pytest

from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.enemy import Enemy, EnemySpawner, EnemyType, size_for_type
from dodgedrop.geometry import Vec2
from dodgedrop.quality import QualityLevel


class _FixedRng:
    def __init__(self, value=None):
        self.value = value
        self.calls = []

    def randint(self, a, b):
        self.calls.append((a, b))
        return b if self.value is None else self.value


@pytest.mark.parametrize(
    "enemy_type, size",
    [
        (EnemyType.SMALL, Vec2(24.0, 24.0)),
        (EnemyType.MID, Vec2(40.0, 40.0)),
        (EnemyType.LARGE, Vec2(64.0, 32.0)),
    ],
)
def test_size_for_type(enemy_type, size):
    assert size_for_type(enemy_type) == size


def test_enemy_falls_by_speed_times_dt():
    enemy = Enemy(Vec2(10.0, 0.0), Vec2(24.0, 24.0), 100.0, EnemyType.SMALL)
    enemy.update(1.0)
    assert enemy.pos == Vec2(10.0, 100.0)
    assert enemy.alive


def test_enemy_dies_only_below_margin():
    enemy = Enemy(Vec2(0.0, SCREEN_H + 80.0), Vec2(24.0, 24.0), 100.0, EnemyType.SMALL)
    enemy.update(0.0)
    assert enemy.alive
    enemy.update(0.01)
    assert not enemy.alive


def test_spawner_first_spawn_after_interval():
    spawner = EnemySpawner(random.Random(0))
    assert spawner.fall_speed == 260.0
    assert not spawner.update_and_should_spawn(0.1, 0.0)
    assert not spawner.update_and_should_spawn(0.3, 0.0)
    assert spawner.update_and_should_spawn(0.1, 0.0)


def test_spawner_interval_has_floor():
    spawner = EnemySpawner(random.Random(0))
    assert not spawner.update_and_should_spawn(0.17, 100.0)
    assert spawner.update_and_should_spawn(0.02, 100.0)


def test_spawner_speeds_up_and_resets():
    spawner = EnemySpawner(random.Random(0))
    spawner.update_and_should_spawn(0.0, 5.0)
    early = spawner.fall_speed
    spawner.update_and_should_spawn(0.0, 20.0)
    assert spawner.fall_speed > early > 260.0
    spawner.reset()
    assert spawner.fall_speed == 260.0


@pytest.mark.parametrize(
    "roll, expected",
    [
        (0, EnemyType.SMALL),
        (54, EnemyType.SMALL),
        (55, EnemyType.MID),
        (84, EnemyType.MID),
        (85, EnemyType.LARGE),
        (99, EnemyType.LARGE),
    ],
)
def test_roll_type_thresholds(roll, expected):
    rng = _FixedRng(roll)
    assert EnemySpawner(rng).roll_type() is expected
    assert rng.calls == [(0, 99)]


def test_roll_spawn_x_keeps_enemy_on_screen():
    rng = _FixedRng()
    x = EnemySpawner(rng).roll_spawn_x(64.0)
    assert x == float(SCREEN_W - 64)
    assert rng.calls == [(0, SCREEN_W - 64)]


def test_roll_spawn_x_range_with_real_rng():
    spawner = EnemySpawner(random.Random(7))
    xs = [spawner.roll_spawn_x(40.0) for _ in range(200)]
    assert min(xs) >= 0.0
    assert max(xs) <= SCREEN_W - 40.0


def test_enemy_draw_fill_and_edge():
    surface = pygame.Surface((300, 300))
    enemy = Enemy(Vec2(100.0, 100.0), Vec2(40.0, 40.0), 260.0, EnemyType.MID)
    enemy.draw(surface, QualityLevel.HIGH, 0, 0)
    assert tuple(surface.get_at((120, 120)))[:3] == (255, 160, 80)
    assert tuple(surface.get_at((100, 100)))[:3] == (255, 235, 210)
    assert tuple(surface.get_at((102, 110)))[:3] == (20, 20, 20)


def test_enemy_draw_uses_offset():
    surface = pygame.Surface((300, 300))
    enemy = Enemy(Vec2(100.0, 100.0), Vec2(24.0, 24.0), 260.0, EnemyType.SMALL)
    enemy.draw(surface, QualityLevel.LOW, 50, 20)
    assert tuple(surface.get_at((150, 120)))[:3] == (255, 220, 230)
    assert tuple(surface.get_at((162, 132)))[:3] == (255, 90, 120)