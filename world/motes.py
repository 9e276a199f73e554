"""
meeba module: world/motes.py

Mote supply: motes drift in at a steady rate (motes per second) until the
arena holds ``max_motes`` of them.
"""

from __future__ import annotations
from typing import Iterator, List, Sequence

from config import Settings
from meeba.body import Body
from meeba.factory import spawn_mote
from meeba.prng import Prng


class MoteSpawner:
    def __init__(self) -> None:
        self.spawn_accum = 0.0

    def update(
        self,
        bodies: Sequence[Body],
        dt: float,
        settings: Settings,
        prng: Prng,
        ids: Iterator[int],
    ) -> List[Body]:
        """Returns the motes due this frame; the caller adds them to the population."""
        self.spawn_accum += dt * settings.mote_spawn_rate

        deficit = settings.max_motes - sum(1 for b in bodies if b.is_mote)
        if deficit <= 0:
            # don't bank motes while the arena is full
            self.spawn_accum = min(self.spawn_accum, 1.0)
            return []

        motes: List[Body] = []
        while self.spawn_accum >= 1.0 and len(motes) < deficit:
            self.spawn_accum -= 1.0
            motes.append(spawn_mote(settings, prng, ids))
        return motes
