"""Scene interface, scene identifiers, shared scene state and text drawing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from functools import lru_cache

import pygame

from dodgedrop.config import HI_SCORE_FILE
from dodgedrop.input import Input
from dodgedrop.quality import QualityLevel

TEXT_SIZE = 22

Color = tuple[int, int, int]


class SceneType(Enum):
    TITLE = auto()
    GAME = auto()
    RESULT = auto()


@dataclass
class SceneContext:
    """State shared between scenes and the application loop."""

    last_score: float = 0.0
    hi_score: float = 0.0
    show_fps: bool = True
    fps: float = 60.0
    quality: QualityLevel = QualityLevel.HIGH
    hi_score_path: str = HI_SCORE_FILE


class Scene(ABC):
    """One screen of the game: entered, updated and drawn every frame."""

    exited: bool = False

    def enter(self) -> None:
        """Called when the scene becomes active."""

    def exit(self) -> None:
        """Called when the scene is replaced; marks the scene as finished."""
        self.exited = True

    @abstractmethod
    def update(self, dt: float, input: Input) -> None:
        """Advance the scene by dt seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the scene onto the surface."""


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def draw_text(
    surface: pygame.Surface, text: str, x: int, y: int, color: Color
) -> pygame.Rect:
    """Draw text with its top-left corner at (x, y); return the area covered."""
    rendered = _font(TEXT_SIZE).render(text, False, color)
    return surface.blit(rendered, (x, y))