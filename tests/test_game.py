import random

import pygame
import pytest

from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.enemy import Enemy, EnemyType
from dodgedrop.game import GameScene
from dodgedrop.geometry import Vec2
from dodgedrop.input import Action, Input
from dodgedrop.manager import SceneManager
from dodgedrop.quality import QualityLevel
from dodgedrop.result import ResultScene
from dodgedrop.scene import SceneContext, SceneType
from dodgedrop.score import load_hi_score


@pytest.fixture
def sounds():
    return []


@pytest.fixture
def manager(tmp_path, sounds):
    ctx = SceneContext(hi_score_path=str(tmp_path / "hi.dat"))
    mgr = SceneManager(ctx, sounds.append, random.Random(3))
    mgr.request_change(SceneType.GAME)
    mgr.update(0.0, Input())
    return mgr


def _held(*actions):
    inp = Input()
    inp.update(set(actions))
    return inp


def _enemy_on_player(game):
    pos = game.player.pos
    return Enemy(
        pos=Vec2(pos.x, pos.y),
        size=Vec2(24.0, 24.0),
        fall_speed=0.0,
        enemy_type=EnemyType.SMALL,
    )


def test_enter_starts_fresh(manager):
    game = manager.scene
    assert isinstance(game, GameScene)
    assert game.elapsed == 0.0
    assert game.enemies == []
    assert game.game_over is False


def test_time_advances_with_dt(manager):
    game = manager.scene
    manager.update(0.1, Input())
    assert game.elapsed == pytest.approx(0.1)


def test_spawns_enemy_after_interval(manager):
    game = manager.scene
    manager.update(0.5, Input())
    assert len(game.enemies) == 1
    assert game.enemies[0].alive


def test_enemy_below_screen_is_removed(manager):
    game = manager.scene
    game.enemies.append(
        Enemy(pos=Vec2(0.0, SCREEN_H + 79.0), size=Vec2(24.0, 24.0), fall_speed=100.0)
    )
    manager.update(0.1, Input())
    assert game.enemies == []


def test_collision_ends_game(manager, sounds):
    game = manager.scene
    game.enemies.append(_enemy_on_player(game))
    manager.update(0.01, Input())
    assert game.game_over is True
    assert sounds == ["hit"]
    assert manager.context.last_score == pytest.approx(game.elapsed)


def test_game_over_leads_to_result(manager):
    game = manager.scene
    game.enemies.append(_enemy_on_player(game))
    manager.update(0.01, Input())
    manager.update(0.7, Input())
    assert isinstance(manager.scene, ResultScene)
    ctx = manager.context
    assert ctx.hi_score == ctx.last_score
    assert load_hi_score(ctx.hi_score_path) == pytest.approx(ctx.hi_score)


def test_game_over_waits_before_result(manager):
    game = manager.scene
    game.enemies.append(_enemy_on_player(game))
    manager.update(0.01, Input())
    manager.update(0.1, Input())
    assert manager.scene is game


def test_back_goes_to_result_with_score(manager, sounds):
    manager.update(0.2, Input())
    manager.update(0.1, _held(Action.BACK))
    assert isinstance(manager.scene, ResultScene)
    assert sounds == ["back"]
    assert manager.context.last_score == pytest.approx(0.2)


def test_toggle_fps_and_force_low(manager):
    manager.update(0.01, _held(Action.TOGGLE_FPS, Action.FORCE_LOW))
    assert manager.context.show_fps is False
    assert manager.context.quality is QualityLevel.LOW


def test_draw_background(manager):
    surface = pygame.Surface((SCREEN_W, SCREEN_H))
    manager.scene.draw(surface)
    assert tuple(surface.get_at((1, 1)))[:3] == (6, 8, 14)


def test_flash_brightens_after_hit(manager):
    game = manager.scene
    game.enemies.append(_enemy_on_player(game))
    manager.update(0.01, Input())
    surface = pygame.Surface((SCREEN_W, SCREEN_H))
    game.draw(surface)
    assert surface.get_at((1, 1))[0] > 6