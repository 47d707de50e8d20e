# entities/sensors.py
from __future__ import annotations
from typing import List, Tuple

import pygame

from entities.state import Action

SMALL_OFFSET = 5.0

_SMALL = frozenset({Action.ROLLING, Action.JUMPING, Action.CROUCHING})

Line = Tuple[Tuple[float, float], Tuple[float, float]]


def is_small(action: Action) -> bool:
    return action in _SMALL


def hotspot(position: pygame.Vector2, action: Action) -> pygame.Vector2:
    """Curled-up poses sit lower so their feet stay on the ground line."""
    if is_small(action):
        return pygame.Vector2(position.x, position.y + SMALL_OFFSET)
    return pygame.Vector2(position)


def hitbox(action: Action) -> pygame.Rect:
    """Hitbox relative to the hotspot."""
    if action in (Action.ROLLING, Action.JUMPING):
        return pygame.Rect(-8, -10, 17, 21)
    if action is Action.CROUCHING:
        return pygame.Rect(-8, -4, 17, 17)
    return pygame.Rect(-8, -16, 17, 33)


def sensor_lines(action: Action) -> List[Line]:
    """
    Collision probes relative to the hotspot, in the order
    A/B (ground), C/D (ceiling), E/F (walls).
    """
    off = SMALL_OFFSET if is_small(action) else 0.0
    return [
        ((-8.0, 0.0), (-8.0, 18.0 - off)),
        ((8.0, 0.0), (8.0, 18.0 - off)),
        ((-8.0, 0.0), (-8.0, -20.0 + off)),
        ((8.0, 0.0), (8.0, -20.0 + off)),
        ((0.0, 0.0), (-11.0, 0.0)),
        ((0.0, 0.0), (11.0, 0.0)),
    ]
