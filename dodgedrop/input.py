"""Mapping of keyboard and gamepad state to game actions, with edge detection."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from enum import Enum, auto

import pygame

_AXIS_DEADZONE = 0.5


class Action(Enum):
    LEFT = auto()
    RIGHT = auto()
    DECIDE = auto()
    BACK = auto()
    QUIT = auto()
    TOGGLE_FPS = auto()
    FORCE_LOW = auto()


_KEY_BINDINGS: dict[Action, tuple[int, ...]] = {
    Action.LEFT: (pygame.K_LEFT, pygame.K_a),
    Action.RIGHT: (pygame.K_RIGHT, pygame.K_d),
    Action.DECIDE: (pygame.K_RETURN, pygame.K_SPACE),
    Action.BACK: (pygame.K_ESCAPE,),
    Action.QUIT: (pygame.K_ESCAPE,),
    Action.TOGGLE_FPS: (pygame.K_F1,),
    Action.FORCE_LOW: (pygame.K_F2,),
}

_WATCHED_KEYS = frozenset(key for keys in _KEY_BINDINGS.values() for key in keys)


def actions_from_state(
    pressed_keys: Collection[int],
    pad_left: bool = False,
    pad_right: bool = False,
    pad_a: bool = False,
    pad_b: bool = False,
) -> frozenset[Action]:
    """Return the set of actions held down for the given keys and pad inputs."""
    pad = {
        Action.LEFT: pad_left,
        Action.RIGHT: pad_right,
        Action.DECIDE: pad_a,
        Action.BACK: pad_b,
    }
    return frozenset(
        action
        for action, keys in _KEY_BINDINGS.items()
        if pad.get(action, False) or any(key in pressed_keys for key in keys)
    )


def poll_actions(joystick=None) -> frozenset[Action]:
    """Read the live keyboard (and an optional joystick) and return held actions."""
    state = pygame.key.get_pressed()
    pressed = {key for key in _WATCHED_KEYS if state[key]}

    pad_left = pad_right = pad_a = pad_b = False
    if joystick is not None:
        axis_x = joystick.get_axis(0) if joystick.get_numaxes() > 0 else 0.0
        hat_x = joystick.get_hat(0)[0] if joystick.get_numhats() > 0 else 0
        pad_left = axis_x < -_AXIS_DEADZONE or hat_x < 0
        pad_right = axis_x > _AXIS_DEADZONE or hat_x > 0
        buttons = joystick.get_numbuttons()
        pad_a = buttons > 0 and bool(joystick.get_button(0))
        pad_b = buttons > 1 and bool(joystick.get_button(1))

    return actions_from_state(pressed, pad_left, pad_right, pad_a, pad_b)


class Input:
    """Tracks held actions across frames to report presses, triggers and releases."""

    def __init__(self) -> None:
        self._prev: frozenset[Action] = frozenset()
        self._curr: frozenset[Action] = frozenset()
        self._move_x = 0.0

    def update(self, down: Iterable[Action]) -> None:
        """Advance one frame with the actions currently held down."""
        self._prev = self._curr
        self._curr = frozenset(down)

        move = 0.0
        if self.pressed(Action.LEFT):
            move -= 1.0
        if self.pressed(Action.RIGHT):
            move += 1.0
        self._move_x = move

    def pressed(self, action: Action) -> bool:
        """True while the action is held."""
        return action in self._curr

    def triggered(self, action: Action) -> bool:
        """True on the first frame the action is held."""
        return action in self._curr and action not in self._prev

    def released(self, action: Action) -> bool:
        """True on the first frame after the action stops being held."""
        return action in self._prev and action not in self._curr

    @property
    def move_x(self) -> float:
        """Horizontal movement direction: -1, 0 or 1."""
        return self._move_x