# core/input.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Set, Tuple

import pygame

AXIS_DEADZONE = 0.3


class Button(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    JUMP = "jump"
    START = "start"
    BACK = "back"
    DEBUG = "debug"


KEYBOARD_MAP: Dict[int, Button] = {
    pygame.K_UP: Button.UP,
    pygame.K_w: Button.UP,
    pygame.K_DOWN: Button.DOWN,
    pygame.K_s: Button.DOWN,
    pygame.K_LEFT: Button.LEFT,
    pygame.K_a: Button.LEFT,
    pygame.K_RIGHT: Button.RIGHT,
    pygame.K_d: Button.RIGHT,
    pygame.K_z: Button.JUMP,
    pygame.K_SPACE: Button.JUMP,
    pygame.K_RETURN: Button.START,
    pygame.K_ESCAPE: Button.BACK,
    pygame.K_F1: Button.DEBUG,
}

# SDL game controller layout (pygame._sdl2.controller / joystick button ids)
GAMEPAD_MAP: Dict[int, Button] = {
    0: Button.JUMP,     # south face button
    4: Button.BACK,     # select
    6: Button.START,
    8: Button.DEBUG,    # right thumb click
    11: Button.UP,
    12: Button.DOWN,
    13: Button.LEFT,
    14: Button.RIGHT,
}

_DIRECTIONAL_STICK = {
    Button.UP: (1, 1.0),
    Button.DOWN: (1, -1.0),
    Button.LEFT: (0, -1.0),
    Button.RIGHT: (0, 1.0),
}


@dataclass
class InputState:
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    jump: bool = False
    start: bool = False
    back: bool = False
    debug: bool = False
    lstick: Tuple[float, float] = (0.0, 0.0)

    def get(self, button: Button) -> bool:
        return bool(getattr(self, button.value))


class Input:
    """
    Button snapshot shared by every system for one tick.
    - pressing(): level-triggered, held right now
    - pressed(): edge-triggered, went down since the last post_update()
    Call post_update() once after each physics tick so an edge lasts
    exactly one tick no matter how many frames it took to get there.
    """

    def __init__(self):
        self.current = InputState()
        self.previous = InputState()
        self._held: Dict[Button, Set[Tuple[str, int]]] = {}

    def post_update(self):
        self.previous = replace(self.current)

    def pressing(self, button: Button) -> bool:
        return self.current.get(button)

    def pressed(self, button: Button) -> bool:
        return self.current.get(button) and not self.previous.get(button)

    def left_stick(self) -> Tuple[float, float]:
        return self.current.lstick

    def set_button(self, button: Button, state: bool):
        setattr(self.current, button.value, bool(state))
        if button in _DIRECTIONAL_STICK:
            idx, value = _DIRECTIONAL_STICK[button]
            stick = list(self.current.lstick)
            stick[idx] = value
            self.current.lstick = (stick[0], stick[1])
        self._correct_axes()

    def set_keyboard(self, key: int, state: bool):
        button = KEYBOARD_MAP.get(key)
        if button is not None:
            self._set_source(button, ("key", key), state)

    def set_gamepad(self, button_id: int, state: bool):
        button = GAMEPAD_MAP.get(button_id)
        if button is not None:
            self._set_source(button, ("pad", button_id), state)

    def _set_source(self, button: Button, source: Tuple[str, int], state: bool):
        # a button stays down while any key or pad button mapped to it is held
        held = self._held.setdefault(button, set())
        if state:
            held.add(source)
        else:
            held.discard(source)
        self.set_button(button, bool(held))

    def set_axis(self, axis: int, value: float):
        """Left stick: axis 0 is X (right positive), axis 1 is Y (up positive)."""
        active = abs(value) >= AXIS_DEADZONE
        if not active:
            value = 0.0

        if axis == 0:
            self.current.left = active and value < 0.0
            self.current.right = active and value > 0.0
            self.current.lstick = (value, self.current.lstick[1])
        elif axis == 1:
            self.current.up = active and value > 0.0
            self.current.down = active and value < 0.0
            self.current.lstick = (self.current.lstick[0], value)

    def _correct_axes(self):
        x, y = self.current.lstick
        if not self.current.up and not self.current.down:
            y = 0.0
        if not self.current.left and not self.current.right:
            x = 0.0
        self.current.lstick = (x, y)

    def handle_event(self, event: pygame.event.Event):
        if event.type == pygame.KEYDOWN:
            self.set_keyboard(event.key, True)
        elif event.type == pygame.KEYUP:
            self.set_keyboard(event.key, False)
        elif event.type == pygame.JOYBUTTONDOWN:
            self.set_gamepad(event.button, True)
        elif event.type == pygame.JOYBUTTONUP:
            self.set_gamepad(event.button, False)
        elif event.type == pygame.JOYAXISMOTION and event.axis in (0, 1):
            # SDL reports stick Y as down-positive
            value = -event.value if event.axis == 1 else event.value
            self.set_axis(event.axis, value)
