"""The player paddle moving along the bottom of the screen."""

from __future__ import annotations

import pygame

from dodgedrop.config import SCREEN_H, SCREEN_W
from dodgedrop.geometry import Entity, Vec2
from dodgedrop.input import Input
from dodgedrop.quality import QualityLevel
from dodgedrop.render import draw_box, draw_glow_box

PLAYER_SPEED = 420.0  # px/sec

_BODY = (40, 200, 255)
_EDGE = (240, 240, 240)
_INNER_EDGE = (0, 80, 110)
_CENTRE_LINE = (220, 220, 220)


class Player(Entity):
    """A box the player steers left and right."""

    def __init__(self) -> None:
        size = Vec2(64.0, 24.0)
        super().__init__(
            pos=Vec2((SCREEN_W - size.x) * 0.5, SCREEN_H - 80.0),
            size=size,
        )
        self.speed = PLAYER_SPEED

    def update(self, dt: float, input: Input) -> None:
        """Move by the input direction, kept within the screen."""
        self.pos.x += input.move_x * self.speed * dt
        self.pos.x = min(max(self.pos.x, 0.0), SCREEN_W - self.size.x)

    def draw(
        self,
        surface: pygame.Surface,
        quality: QualityLevel,
        offset_x: int = 0,
        offset_y: int = 0,
    ) -> None:
        """Draw the player with glow, edges and a centre line."""
        x1 = int(self.pos.x + offset_x)
        y1 = int(self.pos.y + offset_y)
        x2 = int(self.pos.x + self.size.x + offset_x)
        y2 = int(self.pos.y + self.size.y + offset_y)

        draw_glow_box(surface, x1, y1, x2, y2, _BODY, quality)
        draw_box(surface, x1, y1, x2, y2, _BODY, True)
        draw_box(surface, x1, y1, x2, y2, _EDGE, False)
        draw_box(surface, x1 + 2, y1 + 2, x2 - 2, y2 - 2, _INNER_EDGE, False)

        centre_x = int((x1 + x2) / 2)
        if y2 > y1:
            pygame.draw.line(surface, _CENTRE_LINE, (centre_x, y1), (centre_x, y2 - 1))