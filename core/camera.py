# core/camera.py
from __future__ import annotations
from enum import Enum
from typing import Tuple

import pygame

from core.settings import (
    CAMERA_BORDER,
    CAMERA_FAST_FOLLOW_GSP,
    CAMERA_H_SPEED,
    CAMERA_LOOK_DOWN_MAX,
    CAMERA_LOOK_UP_MAX,
    CAMERA_PAN_SPEED,
    CAMERA_Y_FAST,
    CAMERA_Y_SLOW,
)
from core.utils import approach, clamp
from entities.state import Action


class VerticalBehaviour(Enum):
    CENTER_Y_SLOW = "center_y_slow"     # always chase, slow
    CENTER_Y_FAST = "center_y_fast"     # always chase, fast
    RESPECT_BOUNDS = "respect_bounds"   # only chase outside the dead-zone (airborne)


class DisplacementBehaviour(Enum):
    NONE = "none"
    LOOK_UP = "look_up"
    LOOK_DOWN = "look_down"


Border = Tuple[float, float, float, float]   # left, top, right, bottom


def follow_horizontal(current: float, target: float, border: Border = CAMERA_BORDER) -> float:
    left, _, right, _ = border
    offset = target - current
    if offset < left:
        return current + max(offset - left, -CAMERA_H_SPEED)
    if offset > right:
        return current + min(offset - right, CAMERA_H_SPEED)
    return current


def follow_vertical(mode: VerticalBehaviour, current: float, target: float,
                    border: Border = CAMERA_BORDER) -> float:
    offset = target - current
    if mode is VerticalBehaviour.CENTER_Y_SLOW:
        return current + clamp(offset, -CAMERA_Y_SLOW, CAMERA_Y_SLOW)
    if mode is VerticalBehaviour.CENTER_Y_FAST:
        return current + clamp(offset, -CAMERA_Y_FAST, CAMERA_Y_FAST)

    _, top, _, bottom = border
    if offset < top:
        return current + max(offset - top, -CAMERA_Y_FAST)
    if offset > bottom:
        return current + min(offset - bottom, CAMERA_Y_FAST)
    return current


def pan_displacement(mode: DisplacementBehaviour, current: float) -> float:
    if mode is DisplacementBehaviour.LOOK_UP:
        return max(current - CAMERA_PAN_SPEED, -CAMERA_LOOK_UP_MAX)
    if mode is DisplacementBehaviour.LOOK_DOWN:
        return min(current + CAMERA_PAN_SPEED, CAMERA_LOOK_DOWN_MAX)
    return approach(current, 0.0, CAMERA_PAN_SPEED)


def select_vertical(ground: bool, gsp: float) -> VerticalBehaviour:
    if not ground:
        return VerticalBehaviour.RESPECT_BOUNDS
    if abs(gsp) >= CAMERA_FAST_FOLLOW_GSP:
        return VerticalBehaviour.CENTER_Y_FAST
    return VerticalBehaviour.CENTER_Y_SLOW


def select_modes(ground: bool, action: Action, gsp: float) -> Tuple[VerticalBehaviour, DisplacementBehaviour]:
    """Camera modes for a followed player, chosen fresh every tick."""
    if action is Action.LOOKING_UP:
        pan = DisplacementBehaviour.LOOK_UP
    elif action is Action.CROUCHING:
        pan = DisplacementBehaviour.LOOK_DOWN
    else:
        pan = DisplacementBehaviour.NONE
    return select_vertical(ground, gsp), pan


class Camera:
    """
    One per screen. Tracks a followed point through a dead-zone around
    raw_position, plus a vertical look up/down displacement on top.
    Modes are plain selectors: set them every tick before update().
    position never goes above/left of center, so the view never shows
    anything left of or above the world origin.
    """

    def __init__(self, center: Tuple[float, float]):
        self.center = pygame.Vector2(center)
        if self.center.x < 0 or self.center.y < 0:
            raise ValueError(f"camera center must be non-negative, got {tuple(self.center)}")
        self.border: Border = CAMERA_BORDER
        self.raw_position = pygame.Vector2(self.center)
        self.position = pygame.Vector2(self.center)
        self.displacement = 0.0
        self.vertical_behaviour = VerticalBehaviour.CENTER_Y_SLOW
        self.displacement_behaviour = DisplacementBehaviour.NONE

    @classmethod
    def for_viewport(cls, width: int, height: int) -> "Camera":
        return cls((width * 0.5, height * 0.5))

    def update(self, followed: pygame.Vector2):
        self.raw_position.x = follow_horizontal(self.raw_position.x, followed.x, self.border)
        self.raw_position.y = follow_vertical(
            self.vertical_behaviour, self.raw_position.y, followed.y, self.border
        )
        self.displacement = pan_displacement(self.displacement_behaviour, self.displacement)

        self.position.x = max(self.raw_position.x, self.center.x)
        self.position.y = max(self.raw_position.y + self.displacement, self.center.y)

    def transform(self, point) -> pygame.Vector2:
        """World -> screen."""
        return pygame.Vector2(point) - self.position + self.center

    def apply(self, rect: pygame.Rect) -> pygame.Rect:
        screen = self.transform(rect.topleft)
        return pygame.Rect(int(screen.x), int(screen.y), rect.width, rect.height)

    def border_rect(self) -> pygame.Rect:
        """Dead-zone in screen space, for debug drawing."""
        left, top, right, bottom = self.border
        origin = self.transform(self.raw_position)
        return pygame.Rect(int(origin.x + left), int(origin.y + top),
                           int(right - left), int(bottom - top))
