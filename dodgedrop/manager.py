"""Owns the active scene and switches between scenes on request."""

from __future__ import annotations

import random
from typing import Callable

import pygame

from dodgedrop.game import GameScene
from dodgedrop.input import Input
from dodgedrop.result import ResultScene
from dodgedrop.scene import Scene, SceneContext, SceneType
from dodgedrop.title import TitleScene

SoundPlayer = Callable[[str], None]


class SceneManager:
    """Runs the current scene and applies requested changes after each update."""

    def __init__(
        self,
        context: SceneContext | None = None,
        sound: SoundPlayer | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.context = context if context is not None else SceneContext()
        self._sound = sound
        self._rng = rng or random.Random()
        self._scene: Scene | None = None
        self._next: SceneType | None = None

    @property
    def scene(self) -> Scene | None:
        """The active scene."""
        return self._scene

    def set(self, scene: Scene | None) -> None:
        """Replace the active scene, exiting the old one and entering the new one."""
        if self._scene is not None:
            self._scene.exit()
        self._scene = scene
        if self._scene is not None:
            self._scene.enter()

    def request_change(self, next_type: SceneType) -> None:
        """Ask for a scene change, applied at the end of the next update."""
        self._next = next_type

    def _create(self, scene_type: SceneType) -> Scene:
        if scene_type is SceneType.TITLE:
            return TitleScene(self)
        if scene_type is SceneType.GAME:
            return GameScene(self, self._rng)
        return ResultScene(self)

    def _apply_change(self) -> None:
        if self._next is None:
            return
        next_type, self._next = self._next, None
        self.set(self._create(next_type))

    def update(self, dt: float, input: Input) -> None:
        """Update the active scene, then perform any requested change."""
        if self._scene is not None:
            self._scene.update(dt, input)
        self._apply_change()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the active scene."""
        if self._scene is not None:
            self._scene.draw(surface)

    def play_sound(self, key: str) -> None:
        """Play a sound effect by key, if a player is attached."""
        if self._sound is not None:
            self._sound(key)