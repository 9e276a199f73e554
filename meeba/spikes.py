"""
meeba module: meeba/spikes.py

Spikes are thin triangles stuck to a body's rim. Their geometry is fixed
at creation as offsets from the body center; absolute points are only
refreshed when the body moves.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import Optional, Tuple

from config import Settings
from meeba import turns

Point = Tuple[float, float]


@dataclass(frozen=True)
class SpikeOffsets:
    tip: Point
    base_a: Point
    base_b: Point


@dataclass
class Spike:
    length: int
    drain: float  # calories per second pulled out of a victim
    offsets: SpikeOffsets

    # absolute coordinates, set by move_spike
    tip: Point = (0.0, 0.0)
    base_a: Point = (0.0, 0.0)
    base_b: Point = (0.0, 0.0)

    # spike is inactive until this timestamp (ms)
    deactivate_time: Optional[float] = field(default=None)

    def is_active(self, now: float) -> bool:
        return self.deactivate_time is None or now >= self.deactivate_time


def _offset(angle: float, distance: float) -> Point:
    return (
        math.floor(turns.cos(angle) * distance),
        math.floor(-turns.sin(angle) * distance),
    )


def get_drain(length: int, settings: Settings) -> float:
    """Shorter spikes drain faster."""
    return settings.spike_drain * settings.temperature_adjustment / max(length, 1) ** settings.drain_length_quotient


def spawn_spike(radius: float, angle: float, length: int, settings: Settings) -> Spike:
    half_width = settings.spike_width / 2
    offset_angle = turns.asin(half_width / radius)

    return Spike(
        length=length,
        drain=get_drain(length, settings),
        offsets=SpikeOffsets(
            tip=_offset(angle, length + radius),
            base_a=_offset(angle - offset_angle, radius - 1),
            base_b=_offset(angle + offset_angle, radius - 1),
        ),
    )


def move_spike(spike: Spike, x: float, y: float) -> None:
    o = spike.offsets
    spike.tip = (x + o.tip[0], y + o.tip[1])
    spike.base_a = (x + o.base_a[0], y + o.base_a[1])
    spike.base_b = (x + o.base_b[0], y + o.base_b[1])
