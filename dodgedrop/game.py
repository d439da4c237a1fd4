"""The main play scene: dodge falling enemies for as long as possible."""

from __future__ import annotations

import random

import pygame

from dodgedrop.camera import Camera2D
from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.enemy import Enemy, EnemySpawner, size_for_type
from dodgedrop.geometry import Vec2, intersects
from dodgedrop.input import Action, Input
from dodgedrop.player import Player
from dodgedrop.quality import QualityLevel
from dodgedrop.scene import Scene, SceneType, draw_text

HIT_STOP_SEC = 0.12
SHAKE_STRENGTH_PX = 12.0
SHAKE_TIME_SEC = 0.25
FLASH_SEC = 0.12
FLASH_MAX_ALPHA = 180
RESULT_DELAY_SEC = 0.60

_BACKGROUND = (6, 8, 14)
_GRID = (10, 14, 24)
_WHITE = (240, 240, 240)
_GAME_OVER = (255, 220, 220)
_FLASH = (255, 255, 255)


class GameScene(Scene):
    """Runs the player, the enemies and the game-over effects."""

    def __init__(self, manager, rng: random.Random | None = None) -> None:
        self._manager = manager
        rng = rng or random.Random()
        self._player = Player()
        self._spawner = EnemySpawner(rng)
        self._camera = Camera2D(rng)
        self._enemies: list[Enemy] = []
        self._time = 0.0
        self._game_over = False
        self._to_result_timer = 0.0
        self._hit_stop_timer = 0.0
        self._flash_timer = 0.0
        self._flash_duration = 0.0

    @property
    def elapsed(self) -> float:
        """Seconds survived so far, which is also the score."""
        return self._time

    @property
    def enemies(self) -> list[Enemy]:
        """The enemies currently on the field."""
        return self._enemies

    @property
    def player(self) -> Player:
        """The player's paddle."""
        return self._player

    @property
    def game_over(self) -> bool:
        """Whether the player has been hit."""
        return self._game_over

    def enter(self) -> None:
        self._time = 0.0
        self._enemies.clear()
        self._player = Player()
        self._spawner.reset()
        self._camera.reset()
        self._game_over = False
        self._to_result_timer = 0.0
        self._hit_stop_timer = 0.0
        self._flash_timer = 0.0
        self._flash_duration = 0.0

    def _trigger_game_over(self) -> None:
        if self._game_over:
            return
        self._game_over = True
        self._manager.context.last_score = self._time
        self._manager.play_sound("hit")

        self._hit_stop_timer = HIT_STOP_SEC
        self._camera.add_shake(SHAKE_STRENGTH_PX, SHAKE_TIME_SEC)
        self._flash_duration = FLASH_SEC
        self._flash_timer = self._flash_duration
        self._to_result_timer = RESULT_DELAY_SEC

    def update(self, dt: float, input: Input) -> None:
        ctx = self._manager.context
        if input.triggered(Action.TOGGLE_FPS):
            ctx.show_fps = not ctx.show_fps
        if input.triggered(Action.FORCE_LOW):
            ctx.quality = QualityLevel.LOW

        # Effect timers run even while play is paused.
        self._camera.update(dt)
        if self._flash_timer > 0.0:
            self._flash_timer = max(self._flash_timer - dt, 0.0)

        if not self._game_over and input.triggered(Action.BACK):
            self._manager.play_sound("back")
            ctx.last_score = self._time
            self._manager.request_change(SceneType.RESULT)
            return

        if self._game_over:
            self._to_result_timer -= dt
            if self._to_result_timer <= 0.0:
                self._manager.request_change(SceneType.RESULT)
            return

        if self._hit_stop_timer > 0.0:
            self._hit_stop_timer = max(self._hit_stop_timer - dt, 0.0)
            return

        self._time += dt
        self._player.update(dt, input)

        if self._spawner.update_and_should_spawn(dt, self._time):
            enemy_type = self._spawner.roll_type()
            size = size_for_type(enemy_type)
            x = self._spawner.roll_spawn_x(size.x)
            self._enemies.append(
                Enemy(
                    pos=Vec2(x, -size.y),
                    size=size,
                    fall_speed=self._spawner.fall_speed,
                    enemy_type=enemy_type,
                )
            )

        for enemy in self._enemies:
            enemy.update(dt)
        self._enemies[:] = [enemy for enemy in self._enemies if enemy.alive]

        player_box = self._player.aabb
        if any(intersects(player_box, enemy.aabb) for enemy in self._enemies):
            self._trigger_game_over()

    def _draw_flash_overlay(self, surface: pygame.Surface) -> None:
        if self._flash_timer <= 0.0 or self._flash_duration <= 0.0:
            return
        t = self._flash_timer / self._flash_duration
        alpha = min(max(int(FLASH_MAX_ALPHA * t), 0), 255)
        overlay = pygame.Surface((SCREEN_W, SCREEN_H))
        overlay.fill(_FLASH)
        overlay.set_alpha(alpha)
        surface.blit(overlay, (0, 0))

    def draw(self, surface: pygame.Surface) -> None:
        ox = self._camera.offset_x
        oy = self._camera.offset_y
        quality = self._manager.context.quality

        surface.fill(_BACKGROUND, pygame.Rect(0, 0, SCREEN_W, SCREEN_H))
        if quality is QualityLevel.HIGH:
            shift = int(ox / 4)
            for x in range(0, SCREEN_W, 80):
                pygame.draw.line(surface, _GRID, (x + shift, 0), (x + shift, SCREEN_H))
        else:
            for x in range(0, SCREEN_W, 160):
                pygame.draw.line(surface, _GRID, (x, 0), (x, SCREEN_H))

        draw_text(surface, "GAME", 40, 40, _WHITE)
        draw_text(surface, f"SCORE: {self._time:.2f}", 40, 80, _WHITE)

        self._player.draw(surface, quality, ox, oy)
        for enemy in self._enemies:
            enemy.draw(surface, quality, ox, oy)

        if self._game_over:
            draw_text(
                surface,
                "GAME OVER",
                SCREEN_W // 2 - 80 + ox,
                SCREEN_H // 2 - 20 + oy,
                _GAME_OVER,
            )

        self._draw_flash_overlay(surface)