# entities/state.py
from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from core.utils import signum

logger = logging.getLogger(__name__)


class Direction(Enum):
    LEFT = -1
    RIGHT = 1


class Action(Enum):
    DEFAULT = "default"        # idling, walking or running
    JUMPING = "jumping"
    ROLLING = "rolling"
    CROUCHING = "crouching"
    LOOKING_UP = "looking_up"
    SKIDDING = "skidding"


class ActionEvent(Enum):
    LOOK_UP = "look_up"        # standing still, Up held
    CROUCH = "crouch"          # standing still, Down held
    RELEASE = "release"        # neither look input applies anymore
    BRAKE = "brake"            # pushing against current ground motion
    BRAKE_END = "brake_end"    # ground speed crossed into the held direction
    STOP = "stop"              # ground speed reached exactly zero
    LAND = "land"
    JUMP = "jump"
    AIRBORNE = "airborne"


# (event, from_action) -> to_action; from_action None matches any action.
# Pairs missing from the table leave the action unchanged.
_TRANSITIONS: Dict[Tuple[ActionEvent, Optional[Action]], Action] = {
    (ActionEvent.LOOK_UP, None): Action.LOOKING_UP,
    (ActionEvent.CROUCH, None): Action.CROUCHING,
    (ActionEvent.RELEASE, Action.CROUCHING): Action.DEFAULT,
    (ActionEvent.RELEASE, Action.LOOKING_UP): Action.DEFAULT,
    (ActionEvent.BRAKE, Action.DEFAULT): Action.SKIDDING,
    (ActionEvent.BRAKE, Action.SKIDDING): Action.SKIDDING,
    (ActionEvent.BRAKE_END, Action.SKIDDING): Action.DEFAULT,
    (ActionEvent.STOP, Action.SKIDDING): Action.DEFAULT,
    (ActionEvent.LAND, Action.JUMPING): Action.DEFAULT,
    (ActionEvent.JUMP, None): Action.JUMPING,
    (ActionEvent.AIRBORNE, Action.SKIDDING): Action.DEFAULT,
}

_GROUND_ONLY = frozenset({Action.SKIDDING})


def transition(action: Action, event: ActionEvent, ground: bool) -> Action:
    """
    Single entry point for every action change.
    Ground-only actions never survive (or appear) while airborne.
    """
    nxt = _TRANSITIONS.get((event, action))
    if nxt is None:
        nxt = _TRANSITIONS.get((event, None), action)
    if not ground and nxt in _GROUND_ONLY:
        return Action.DEFAULT
    return nxt


def reduce_angle(angle: float) -> float:
    return angle % 360.0


def surface_trig(angle: float, legacy: bool = False) -> Tuple[float, float]:
    """
    (sin, cos) of a contact angle given in degrees.
    legacy=True feeds the degree value to sin/cos unconverted, which is how
    the first version of the engine behaved; kept so old numbers reproduce.
    """
    a = reduce_angle(angle)
    if not legacy:
        a = math.radians(a)
    return math.sin(a), math.cos(a)


class AttachmentBand(Enum):
    SHALLOW = "shallow"
    HALF_STEEP = "half_steep"
    FULL_STEEP = "full_steep"
    SLOPE = "slope"            # upward contact, wall-ish
    CEILING = "ceiling"        # upward contact, can't be stood on


def attachment_band(angle: float, downward: bool) -> Optional[AttachmentBand]:
    a = reduce_angle(angle)
    if downward:
        if a <= 23.0 or a >= 339.0:
            return AttachmentBand.SHALLOW
        if 23.0 < a <= 45.0 or 315.0 <= a < 339.0:
            return AttachmentBand.HALF_STEEP
        if 45.0 < a <= 90.0 or 270.0 <= a < 315.0:
            return AttachmentBand.FULL_STEEP
        return None
    if 90.0 < a <= 135.0 or 225.0 < a <= 270.0:
        return AttachmentBand.SLOPE
    if 135.0 < a <= 225.0:
        return AttachmentBand.CEILING
    return None


@dataclass
class Speed:
    xsp: float = 0.0      # world-space velocity
    ysp: float = 0.0
    gsp: float = 0.0      # signed speed along the surface, grounded only
    angle: float = 0.0    # contact angle in degrees, 0 = flat ground


@dataclass
class PlayerState:
    ground: bool = True
    action: Action = Action.DEFAULT
    direction: Direction = Direction.RIGHT

    def apply(self, event: ActionEvent) -> Action:
        self.action = transition(self.action, event, self.ground)
        return self.action

    def set_ground(self, new_state: bool, speed: Speed, downward: bool, legacy_trig: bool = False) -> None:
        """
        Set the ground flag, converting world velocity into ground speed on
        landing. Set speed.angle to the contact angle BEFORE calling this.
        """
        if not self.ground and new_state:
            speed.angle = reduce_angle(speed.angle)
            band = attachment_band(speed.angle, downward)
            sin_a, _ = surface_trig(speed.angle, legacy_trig)
            flat_hit = abs(speed.xsp) > abs(speed.ysp)

            if band is AttachmentBand.SHALLOW:
                speed.gsp = speed.xsp
            elif band is AttachmentBand.HALF_STEEP:
                speed.gsp = speed.xsp if flat_hit else speed.ysp * 0.5 * -signum(sin_a)
            elif band is AttachmentBand.FULL_STEEP:
                speed.gsp = speed.xsp if flat_hit else speed.ysp * -signum(sin_a)
            elif band is AttachmentBand.SLOPE:
                speed.gsp = speed.ysp * -signum(sin_a)
            elif band is AttachmentBand.CEILING:
                speed.ysp = 0.0
                new_state = False
                logger.debug("ceiling contact at %.1f deg, landing rejected", speed.angle)

            if new_state:
                logger.debug("landed at %.1f deg (%s), gsp=%.4f",
                          speed.angle, band.value if band else "none", speed.gsp)
                self.action = transition(self.action, ActionEvent.LAND, True)

        self.ground = new_state
