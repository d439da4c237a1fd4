"""Box drawing helpers, including an additive glow whose detail follows quality."""

from __future__ import annotations

import pygame

from dodgedrop.quality import QualityLevel

Color = tuple[int, int, int]

_GLOW_SETTINGS = {
    QualityLevel.HIGH: (6, 18, 90),
    QualityLevel.LOW: (2, 8, 55),
}
_MIN_GLOW_ALPHA = 10


def glow_layers(quality: QualityLevel) -> list[tuple[int, int]]:
    """Return (expand_px, alpha) for each glow layer, innermost first."""
    layers, max_expand, max_alpha = _GLOW_SETTINGS[quality]
    result = []
    for i in range(layers):
        t = 1.0 if layers <= 1 else i / (layers - 1)
        expand = int(t * max_expand)
        alpha = min(max(int(max_alpha * (1.0 - t)), _MIN_GLOW_ALPHA), max_alpha)
        result.append((expand, alpha))
    return result


def _rect(x1: int, y1: int, x2: int, y2: int) -> pygame.Rect | None:
    if x2 <= x1 or y2 <= y1:
        return None
    return pygame.Rect(x1, y1, x2 - x1, y2 - y1)


def draw_box(
    surface: pygame.Surface, x1: int, y1: int, x2: int, y2: int, color: Color, filled: bool
) -> None:
    """Draw a box covering x1..x2-1, y1..y2-1, either filled or as a 1px outline."""
    rect = _rect(x1, y1, x2, y2)
    if rect is None:
        return
    if filled:
        surface.fill(color, rect)
    else:
        pygame.draw.rect(surface, color, rect, 1)


def draw_glow_box(
    surface: pygame.Surface,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
    quality: QualityLevel,
) -> None:
    """Additively blend expanding, fading boxes around the given box."""
    for expand, alpha in glow_layers(quality):
        rect = _rect(x1 - expand, y1 - expand, x2 + expand, y2 + expand)
        if rect is None:
            continue
        scaled = tuple(channel * alpha // 255 for channel in color[:3])
        surface.fill(scaled, rect, special_flags=pygame.BLEND_ADD)