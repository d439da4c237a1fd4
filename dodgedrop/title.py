"""The title screen with a blinking start prompt."""

from __future__ import annotations

import pygame

from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.input import Action, Input
from dodgedrop.quality import QualityLevel
from dodgedrop.scene import Scene, SceneType, draw_text

BLINK_PERIOD = 0.5

_BACKGROUND = (10, 12, 18)
_GRID = (16, 20, 30)
_WHITE = (240, 240, 240)
_GRAY = (180, 180, 180)


class TitleScene(Scene):
    """Shows the title and hi-score; Decide starts a game."""

    def __init__(self, manager) -> None:
        self._manager = manager
        self._blink = 0.0
        self._show_press = True

    @property
    def show_press(self) -> bool:
        """Whether the start prompt is visible this frame."""
        return self._show_press

    def enter(self) -> None:
        self._blink = 0.0
        self._show_press = True

    def update(self, dt: float, input: Input) -> None:
        self._blink += dt
        if self._blink >= BLINK_PERIOD:
            self._blink = 0.0
            self._show_press = not self._show_press

        ctx = self._manager.context
        if input.triggered(Action.TOGGLE_FPS):
            ctx.show_fps = not ctx.show_fps

        if input.triggered(Action.FORCE_LOW):
            ctx.quality = (
                QualityLevel.LOW if ctx.quality is QualityLevel.HIGH else QualityLevel.HIGH
            )

        if input.triggered(Action.DECIDE):
            self._manager.play_sound("decide")
            self._manager.request_change(SceneType.GAME)

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(_BACKGROUND, pygame.Rect(0, 0, SCREEN_W, SCREEN_H))
        for y in range(0, SCREEN_H, 40):
            pygame.draw.line(surface, _GRID, (0, y), (SCREEN_W, y))

        draw_text(surface, "Game A Week - Week1 (Dodge Drop)", 40, 40, _GRAY)
        draw_text(surface, "DODGE DROP", 40, 100, _WHITE)
        draw_text(surface, "Move: Left/Right  Decide: Enter/Space/PadA", 40, 170, _GRAY)
        draw_text(
            surface,
            "Back: Esc/PadB (Result)  F1: Toggle FPS  F2: Force LOW",
            40,
            200,
            _GRAY,
        )
        draw_text(
            surface, f"HI-SCORE: {self._manager.context.hi_score:.2f}", 40, 250, _WHITE
        )
        if self._show_press:
            draw_text(surface, "PRESS DECIDE TO START", 40, 340, _WHITE)