# entities/animation.py
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

from entities.state import Action, PlayerState, Speed

PEEL_SPEED = 9.95
RUN_SPEED = 5.0
FRAME_MS = 16


@dataclass(frozen=True)
class AnimationCue:
    name: str
    duration_ms: Optional[int] = None   # None keeps the clip's own frame time


def _frame_duration(base: float, gsp: float) -> int:
    return int(FRAME_MS * math.floor(max(base - gsp, 1.0)))


def select_animation(state: PlayerState, speed: Speed) -> Optional[AnimationCue]:
    """
    Pick the clip a sprite renderer should play for the player right now.
    Returns None when the current clip should simply keep playing
    (e.g. falling without a jump).
    """
    gsp = abs(speed.gsp)

    if state.ground:
        if state.action is Action.LOOKING_UP:
            name = "lookup"
        elif state.action is Action.CROUCHING:
            name = "crouch"
        elif state.action is Action.SKIDDING:
            name = "skid"
        elif state.action is Action.DEFAULT:
            if gsp >= PEEL_SPEED:
                name = "peel"
            elif gsp >= RUN_SPEED:
                name = "run"
            elif gsp > 0.0:
                name = "walk"
            else:
                name = "idle"
        else:
            name = "walk"

        duration = _frame_duration(9.0, gsp) if 0.0 < gsp < PEEL_SPEED else None
        return AnimationCue(name, duration)

    if state.action in (Action.JUMPING, Action.ROLLING):
        return AnimationCue("roll", _frame_duration(4.0, gsp))

    return None
