# entities/physics.py
from __future__ import annotations
import logging
import math
from typing import Optional

import pygame

from core.input import Button, Input
from core.settings import LEGACY_RADIAN_TRIG, STILL_EPSILON
from core.utils import signum
from entities.constants import PlayerConstants
from entities.state import (
    Action,
    ActionEvent,
    Direction,
    PlayerState,
    Speed,
    reduce_angle,
    surface_trig,
)
from world.terrain import FlatFloor, Terrain

logger = logging.getLogger(__name__)

AIR_DRAG_STEP = 0.125
AIR_DRAG_DIVISOR = 256.0

_fallback_floor = FlatFloor()


def update(
    state: PlayerState,
    constants: PlayerConstants,
    position: pygame.Vector2,
    speed: Speed,
    inp: Input,
    terrain: Optional[Terrain] = None,
    legacy_trig: bool = LEGACY_RADIAN_TRIG,
):
    """
    One fixed physics tick for one player. Order matters:
      - terrain contact while airborne
      - ground: look/crouch, accel, friction, slope, speed cap, decompose
      - air: air accel, drag, speed cap, gravity, jump release cap
      - jump on the rising edge of the jump button
      - integrate position
    Never raises; every input combination has a defined outcome.
    """
    up = inp.pressing(Button.UP)
    down = inp.pressing(Button.DOWN)
    left = inp.pressing(Button.LEFT)
    right = inp.pressing(Button.RIGHT)

    if terrain is None:
        terrain = _fallback_floor

    # Contact
    if not state.ground:
        contact = terrain.probe(position, speed)
        if contact is not None:
            position.y = contact.y
            speed.angle = contact.angle
            state.set_ground(True, speed, contact.downward, legacy_trig)

    speed.angle = reduce_angle(speed.angle)

    # Horizontal movement
    if state.ground:
        _ground_movement(state, constants, speed, up, down, left, right, legacy_trig)
    else:
        _air_movement(state, constants, speed, left, right)

    # Vertical movement
    if not state.ground:
        _air_vertical(state, constants, speed, inp.pressing(Button.JUMP))
    elif inp.pressed(Button.JUMP):
        jump(state, constants, speed, legacy_trig)

    position.x += speed.xsp
    position.y += speed.ysp


def _ground_movement(state, constants, speed, up, down, left, right, legacy_trig):
    still = abs(speed.gsp) <= STILL_EPSILON
    if still and up and not down:
        state.apply(ActionEvent.LOOK_UP)
    elif still and down and not up:
        state.apply(ActionEvent.CROUCH)
    else:
        state.apply(ActionEvent.RELEASE)

    if state.action in (Action.DEFAULT, Action.SKIDDING):
        if right and not left:
            state.direction = Direction.RIGHT
            if speed.gsp < 0.0:
                state.apply(ActionEvent.BRAKE)
                speed.gsp += constants.dec
            else:
                speed.gsp += constants.acc
            if state.action is Action.SKIDDING and speed.gsp >= 0.0:
                state.apply(ActionEvent.BRAKE_END)
        elif left and not right:
            state.direction = Direction.LEFT
            if speed.gsp > 0.0:
                state.apply(ActionEvent.BRAKE)
                speed.gsp -= constants.dec
            else:
                speed.gsp -= constants.acc
            if state.action is Action.SKIDDING and speed.gsp <= 0.0:
                state.apply(ActionEvent.BRAKE_END)

    # Friction, only when not steering one way
    if left == right:
        speed.gsp -= min(abs(speed.gsp), constants.frc) * signum(speed.gsp)

    if speed.gsp == 0.0:
        state.apply(ActionEvent.STOP)

    angle_sin, angle_cos = surface_trig(speed.angle, legacy_trig)

    if abs(speed.gsp) >= constants.min_slp:
        speed.gsp -= angle_sin * slope_factor(state.action, constants, speed.gsp, angle_sin)

    if abs(speed.gsp) >= constants.top:
        speed.gsp = constants.top * signum(speed.gsp)

    speed.xsp = speed.gsp * angle_cos
    speed.ysp = speed.gsp * -angle_sin


def slope_factor(action: Action, constants: PlayerConstants, gsp: float, angle_sin: float) -> float:
    if action is not Action.ROLLING:
        return constants.slp
    if signum(gsp) == signum(angle_sin):
        return constants.slprollup
    return constants.slprolldown


def _air_movement(state, constants, speed, left, right):
    if right and not left:
        speed.xsp += constants.air
        state.direction = Direction.RIGHT
    elif left and not right:
        speed.xsp -= constants.air
        state.direction = Direction.LEFT


def _air_vertical(state, constants, speed, jump_held):
    state.apply(ActionEvent.AIRBORNE)

    # Air drag near the top of a jump; fmod keeps the remainder's sign
    if constants.minjmp < speed.ysp < 0.0:
        speed.xsp -= math.fmod(speed.xsp, AIR_DRAG_STEP) / AIR_DRAG_DIVISOR

    if abs(speed.xsp) >= constants.top:
        speed.xsp = constants.top * signum(speed.xsp)

    speed.ysp += constants.grv

    # Releasing jump early caps the rise
    if not jump_held and speed.ysp < constants.minjmp:
        speed.ysp = constants.minjmp


def jump(state: PlayerState, constants: PlayerConstants, speed: Speed, legacy_trig: bool = LEGACY_RADIAN_TRIG):
    """Leave the ground with an impulse perpendicular to the surface."""
    state.set_ground(False, speed, True, legacy_trig)
    state.apply(ActionEvent.JUMP)
    angle_sin, angle_cos = surface_trig(speed.angle, legacy_trig)
    speed.xsp -= constants.jmp * angle_sin
    speed.ysp -= constants.jmp * angle_cos
    logger.debug("jump at %.1f deg: xsp=%.4f ysp=%.4f", speed.angle, speed.xsp, speed.ysp)
