# entities/constants.py
from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Dict


@dataclass(frozen=True)
class PlayerConstants:
    """
    Per-character movement tuning. Every value is per physics tick.
    - Frozen: a character's feel never changes after spawn
    - Use PlayerConstants.preset(name) for the named characters
    """
    # Ground
    acc: float = 0.046875         # acceleration
    dec: float = 0.5              # deceleration when reversing
    frc: float = 0.046875         # friction, normally equals acc
    top: float = 6.0              # top horizontal speed

    # Slopes
    slp: float = 0.125            # walking / running
    slprollup: float = 0.078125   # rolling uphill
    slprolldown: float = 0.3125   # rolling downhill
    min_slp: float = 0.05078125   # min |gsp| before slope factor applies
    fall: float = 2.5             # tolerance speed for sticking to walls/ceilings

    # Air
    air: float = 0.09375          # air acceleration, normally 2x acc
    jmp: float = 6.5              # jump force
    grv: float = 0.21875          # gravity
    minjmp: float = -4.0          # ysp cap when jump is released early

    def __post_init__(self) -> None:
        if self.top <= 0.0:
            raise ValueError(f"top must be positive, got {self.top}")
        if self.grv <= 0.0:
            raise ValueError(f"grv must be positive, got {self.grv}")
        if self.minjmp >= 0.0:
            raise ValueError(f"minjmp must be negative (upward), got {self.minjmp}")

    @classmethod
    def preset(cls, name: str) -> "PlayerConstants":
        try:
            return PRESETS[name]
        except KeyError:
            known = ", ".join(sorted(PRESETS))
            raise ValueError(f"unknown character preset {name!r} (known: {known})") from None


_DEFAULT = PlayerConstants()

PRESETS: Dict[str, PlayerConstants] = {
    "default": _DEFAULT,
    # lower jump, everything else shared
    "heavy-jumper": replace(_DEFAULT, jmp=6.0),
}
