# core/utils.py
import math


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def signum(value: float) -> float:
    """
    Sign that follows the sign bit, so +0.0 -> 1.0 and -0.0 -> -1.0.
    Matches the float signum the movement tuning was written against.
    """
    return math.copysign(1.0, value)


def approach(value: float, target: float, step: float) -> float:
    """Move value toward target by at most step, never overshooting."""
    if value < target:
        return min(value + step, target)
    if value > target:
        return max(value - step, target)
    return value
