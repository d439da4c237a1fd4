import pygame
import pytest

from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.geometry import Vec2
from dodgedrop.input import Action, Input
from dodgedrop.player import Player
from dodgedrop.quality import QualityLevel


def _input(*actions):
    inp = Input()
    inp.update(set(actions))
    return inp


def test_player_starts_centred_near_bottom():
    player = Player()
    assert player.size == Vec2(64.0, 24.0)
    assert player.pos.x + player.size.x / 2 == pytest.approx(SCREEN_W / 2)
    assert player.pos.y == SCREEN_H - 80.0
    assert player.alive


def test_no_input_does_not_move():
    player = Player()
    start = Vec2(player.pos.x, player.pos.y)
    player.update(1.0, _input())
    assert player.pos == start


def test_moves_right_and_left():
    player = Player()
    start = player.pos.x
    player.update(0.1, _input(Action.RIGHT))
    assert player.pos.x > start
    moved_right = player.pos.x
    player.update(0.1, _input(Action.LEFT))
    assert player.pos.x < moved_right


def test_clamped_to_right_edge():
    player = Player()
    player.update(10.0, _input(Action.RIGHT))
    assert player.pos.x == SCREEN_W - player.size.x


def test_clamped_to_left_edge():
    player = Player()
    player.update(10.0, _input(Action.LEFT))
    assert player.pos.x == 0.0


def test_draw_body_edge_and_centre_line():
    surface = pygame.Surface((SCREEN_W, SCREEN_H))
    player = Player()
    player.draw(surface, QualityLevel.HIGH)
    x1 = int(player.pos.x)
    y1 = int(player.pos.y)
    x2 = int(player.pos.x + player.size.x)
    centre = int((x1 + x2) / 2)
    assert tuple(surface.get_at((x1, y1)))[:3] == (240, 240, 240)
    assert tuple(surface.get_at((centre, y1 + 10)))[:3] == (220, 220, 220)
    assert tuple(surface.get_at((x1 + 10, y1 + 10)))[:3] == (40, 200, 255)
    assert tuple(surface.get_at((x1 + 2, y1 + 10)))[:3] == (0, 80, 110)