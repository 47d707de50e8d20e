# entities/player.py
import logging
from typing import Optional, Tuple

import pygame

from core.camera import DisplacementBehaviour, VerticalBehaviour, select_modes
from core.input import Input
from core.settings import (
    HITBOX_COLOR,
    LEGACY_RADIAN_TRIG,
    PLAYER_COLOR,
    SPAWN_X,
    SPAWN_Y,
)
from entities import physics, sensors
from entities.animation import AnimationCue, select_animation
from entities.constants import PlayerConstants
from entities.state import Action, PlayerState, Speed

logger = logging.getLogger(__name__)


class Player:
    """
    One controllable character. Owns four independent records:
      - state: ground flag, action, facing
      - constants: movement tuning (immutable)
      - speed: xsp/ysp/gsp/angle
      - position: world-space hotspot (center of the body)
    Nothing here is shared between players.
    """

    def __init__(
        self,
        constants: Optional[PlayerConstants] = None,
        spawn: Tuple[float, float] = (SPAWN_X, SPAWN_Y),
        legacy_trig: bool = LEGACY_RADIAN_TRIG,
    ):
        self.constants = constants if constants is not None else PlayerConstants()
        self.spawn = pygame.Vector2(spawn)
        self.legacy_trig = legacy_trig

        self.state = PlayerState()
        self.speed = Speed()
        self.position = pygame.Vector2(self.spawn)

    @classmethod
    def from_preset(cls, name: str, **kwargs) -> "Player":
        return cls(PlayerConstants.preset(name), **kwargs)

    def respawn(self):
        self.position = pygame.Vector2(self.spawn)
        self.speed = Speed()
        self.state = PlayerState()
        logger.debug("respawned at (%.1f, %.1f)", self.position.x, self.position.y)

    def update(self, inp: Input, terrain=None):
        physics.update(
            self.state,
            self.constants,
            self.position,
            self.speed,
            inp,
            terrain=terrain,
            legacy_trig=self.legacy_trig,
        )

    # ------------------------------------------------------------
    # Read-only views for camera / animation / debug collaborators
    # ------------------------------------------------------------
    @property
    def direction(self):
        return self.state.direction

    @property
    def ground(self) -> bool:
        return self.state.ground

    @property
    def action(self) -> Action:
        return self.state.action

    def animation(self) -> Optional[AnimationCue]:
        return select_animation(self.state, self.speed)

    def camera_modes(self) -> Tuple[VerticalBehaviour, DisplacementBehaviour]:
        return select_modes(self.state.ground, self.state.action, self.speed.gsp)

    def draw(self, surf: pygame.Surface, camera, debug: bool = False):
        spot = sensors.hotspot(self.position, self.state.action)
        box = sensors.hitbox(self.state.action).move(int(spot.x), int(spot.y))
        rr = camera.apply(box)
        pygame.draw.rect(surf, PLAYER_COLOR, rr)
        pygame.draw.rect(surf, (20, 20, 26), rr, 2)

        if debug:
            pygame.draw.rect(surf, HITBOX_COLOR, rr, 1)
            origin = camera.transform(spot)
            for start, end in sensors.sensor_lines(self.state.action):
                pygame.draw.line(surf, (0, 240, 0), origin + start, origin + end)
