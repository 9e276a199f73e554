"""
meeba module: render/colors.py

Central color palette plus the hue conversions bodies are tinted with.
"""

from __future__ import annotations
import colorsys
from typing import Tuple

BG = (14, 14, 18)
SPIKE = (20, 20, 24)
HIT_SPIKE = (230, 60, 60)
OUTLINE = (40, 40, 48)
HUD = (235, 235, 235)

BODY_LIGHTNESS = 0.45
BODY_SATURATION = 0.75


def rgb_to_hue(r: float, g: float, b: float) -> float:
    """
    Hue (in turns) of three non-negative channel weights.
    All zero is a grey with hue 0.
    """
    top = max(r, g, b)
    if top <= 0:
        return 0.0
    hue, _, _ = colorsys.rgb_to_hsv(r / top, g / top, b / top)
    return hue


def hue_to_rgb(hue: float) -> Tuple[int, int, int]:
    r, g, b = colorsys.hls_to_rgb(hue, BODY_LIGHTNESS, BODY_SATURATION)
    return int(r * 255), int(g * 255), int(b * 255)


def hue_to_fill(hue: float) -> str:
    return "#{:02x}{:02x}{:02x}".format(*hue_to_rgb(hue))


def fill_to_rgb(fill: str) -> Tuple[int, int, int]:
    text = fill.lstrip("#")
    if len(text) == 3:
        text = "".join(ch * 2 for ch in text)
    return int(text[0:2], 16), int(text[2:4], 16), int(text[4:6], 16)
