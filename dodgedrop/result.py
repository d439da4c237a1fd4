"""The result screen showing the score and recording new hi-scores."""

from __future__ import annotations

import pygame

from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.input import Action, Input
from dodgedrop.quality import QualityLevel
from dodgedrop.scene import Scene, SceneType, draw_text
from dodgedrop.score import save_hi_score

_BACKGROUND = (12, 8, 8)
_WHITE = (240, 240, 240)
_GRAY = (180, 180, 180)
_GOLD = (255, 240, 160)


class ResultScene(Scene):
    """Shows the last score; Decide retries, Back returns to the title."""

    def __init__(self, manager) -> None:
        self._manager = manager
        self._is_new = False

    @property
    def is_new(self) -> bool:
        """Whether the last score set a new record."""
        return self._is_new

    def enter(self) -> None:
        self._is_new = False
        ctx = self._manager.context
        if ctx.last_score > ctx.hi_score:
            ctx.hi_score = ctx.last_score
            try:
                save_hi_score(ctx.hi_score_path, ctx.hi_score)
            except OSError:
                # The record still counts for this session if it cannot be stored.
                pass
            self._is_new = True

    def update(self, dt: float, input: Input) -> None:
        ctx = self._manager.context
        if input.triggered(Action.TOGGLE_FPS):
            ctx.show_fps = not ctx.show_fps

        if input.triggered(Action.FORCE_LOW):
            ctx.quality = QualityLevel.LOW

        if input.triggered(Action.DECIDE):
            self._manager.play_sound("decide")
            self._manager.request_change(SceneType.GAME)
            return

        if input.triggered(Action.BACK):
            self._manager.play_sound("back")
            self._manager.request_change(SceneType.TITLE)

    def draw(self, surface: pygame.Surface) -> None:
        ctx = self._manager.context
        surface.fill(_BACKGROUND, pygame.Rect(0, 0, SCREEN_W, SCREEN_H))

        draw_text(surface, "RESULT", 40, 40, _WHITE)
        draw_text(surface, "Decide: Retry (-> Game)", 40, 90, _GRAY)
        draw_text(surface, "Back  : Title (-> Title)", 40, 120, _GRAY)
        draw_text(surface, f"SCORE: {ctx.last_score:.2f}", 40, 200, _WHITE)
        draw_text(surface, f"HI-SCORE: {ctx.hi_score:.2f}", 40, 240, _WHITE)

        if self._is_new:
            draw_text(surface, "NEW RECORD!", 40, 280, _GOLD)