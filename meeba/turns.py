"""
meeba module: meeba/turns.py

Angles measured in turns: 1 turn = 360 degrees, so every heading lives in
[0, 1). Trig goes through lookup tables. Screen y grows downward, so a
heading of 0.25 points up.
"""

from __future__ import annotations
import math
from typing import Tuple

TAU = 2 * math.pi

LUT_RES = 1024
HALF_LUT_RES = LUT_RES // 2

# rounded so the axis points come out exact (sin(0.5) == 0.0, not 1.2e-16)
_SIN = [round(math.sin(TAU * i / LUT_RES), 15) for i in range(LUT_RES)]
_COS = [round(math.cos(TAU * i / LUT_RES), 15) for i in range(LUT_RES)]
_ASIN = [math.asin((i - HALF_LUT_RES) / HALF_LUT_RES) for i in range(LUT_RES + 1)]
_ACOS = [math.acos((i - HALF_LUT_RES) / HALF_LUT_RES) for i in range(LUT_RES + 1)]


def round_angle(turns: float) -> float:
    """Normalize an angle to [0, 1)."""
    turns = turns % 1.0
    if turns >= 1.0:
        # tiny negatives round up to exactly 1.0
        return 0.0
    return turns


def sin(turns: float) -> float:
    return _SIN[int(round_angle(turns) * LUT_RES)]


def cos(turns: float) -> float:
    return _COS[int(round_angle(turns) * LUT_RES)]


def _inverse_index(ratio: float) -> int:
    ratio = max(-1.0, min(1.0, ratio))
    return int(math.floor(ratio * HALF_LUT_RES + HALF_LUT_RES))


def asin(ratio: float) -> float:
    return _ASIN[_inverse_index(ratio)] / TAU


def acos(ratio: float) -> float:
    return _ACOS[_inverse_index(ratio)] / TAU


def bounce_x(angle: float) -> float:
    """Reflect off a vertical wall (left/right)."""
    return round_angle(0.5 - angle)


def bounce_y(angle: float) -> float:
    """Reflect off a horizontal wall (top/bottom)."""
    return round_angle(1.0 - angle)


def to_vector(angle: float, magnitude: float) -> Tuple[float, float]:
    return cos(angle) * magnitude, -sin(angle) * magnitude


def from_vector(x: float, y: float) -> Tuple[float, float]:
    """Returns (angle in turns, magnitude)."""
    return round_angle(math.atan2(-y, x) / TAU), math.hypot(x, y)
