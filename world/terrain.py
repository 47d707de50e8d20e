# world/terrain.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Protocol

import pygame

from core.settings import FLOOR_Y


@dataclass(frozen=True)
class Contact:
    """What the movement integrator needs to know about a surface hit."""
    angle: float          # degrees, 0 = flat floor
    downward: bool        # True for floor-like contact, False when moving up into it
    y: float              # surface height to snap the hotspot to


class Terrain(Protocol):
    def probe(self, position: pygame.Vector2, speed) -> Optional[Contact]:
        ...

    def draw(self, surf: pygame.Surface, camera, color) -> None:
        ...


class FlatFloor:
    """
    Stand-in for real collision: an endless horizontal floor.
    Reports contact once the hotspot reaches or passes the floor line.
    """

    def __init__(self, y: float = FLOOR_Y):
        self.y = float(y)

    def probe(self, position: pygame.Vector2, speed) -> Optional[Contact]:
        if position.y >= self.y:
            return Contact(angle=0.0, downward=True, y=self.y)
        return None

    def draw(self, surf: pygame.Surface, camera, color):
        width, height = surf.get_size()
        top = int(camera.transform(pygame.Vector2(0.0, self.y)).y)
        if top < height:
            pygame.draw.rect(surf, color, (0, top, width, height - top))
