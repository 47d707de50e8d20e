# world/level.py
import logging
from typing import List, Optional

import pygame

from core.input import Button, Input
from core.settings import DEFAULT_PRESET, FLOOR_COLOR
from entities.player import Player
from world.terrain import FlatFloor, Terrain

logger = logging.getLogger(__name__)


class Level:
    def __init__(self, preset: str = DEFAULT_PRESET, terrain: Optional[Terrain] = None):
        self.terrain = terrain if terrain is not None else FlatFloor()
        self.players: List[Player] = [Player.from_preset(preset)]
        logger.info("level ready with preset %r", preset)

    @property
    def player(self) -> Player:
        return self.players[0]

    def update(self, inp: Input):
        if inp.pressed(Button.START):
            self.respawn_all()

        for p in self.players:
            p.update(inp, self.terrain)

    def respawn_all(self):
        for p in self.players:
            p.respawn()
        logger.info("respawned %d player(s)", len(self.players))

    def draw(self, surf: pygame.Surface, camera, debug: bool = False):
        self.terrain.draw(surf, camera, FLOOR_COLOR)

        for p in self.players:
            p.draw(surf, camera, debug=debug)
