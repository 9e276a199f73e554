"""
meeba module: meeba/body.py

Body container: a circle with a genome, vitals and spikes.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from meeba.spikes import Spike, move_spike
from meeba.vitals import Vitals


@dataclass
class Velocity:
    angle: float = 0.0  # turns
    speed: float = 0.0  # pixels per second


@dataclass
class BodyMeta:
    """Scratch state owned by the physics pass."""
    next_x: float = 0.0
    next_y: float = 0.0
    last_collision_id: Optional[int] = None
    spawn_ready: bool = False


@dataclass
class Body:
    id: int
    dna: str  # hex genome, empty for motes
    fill: str
    x: float
    y: float
    mass: float
    radius: float
    vitals: Vitals
    velocity: Velocity = field(default_factory=Velocity)
    spikes: List[Spike] = field(default_factory=list)
    meta: BodyMeta = field(default_factory=BodyMeta)

    @property
    def is_mote(self) -> bool:
        return not self.dna

    def move_to(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        for spike in self.spikes:
            move_spike(spike, x, y)
