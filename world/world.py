"""
meeba module: world/world.py

World state container: settings snapshot, PRNG stream, population, clock.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import itertools
import logging
from typing import Iterator, List, Optional

from config import Settings
from evolution.reproduction import reproduce
from meeba.body import Body
from meeba.factory import get_random_body
from meeba.prng import Prng
from world.motes import MoteSpawner
from world.physics import simulate_frame

logger = logging.getLogger(__name__)


@dataclass
class WorldStats:
    frames: int = 0
    births: int = 0
    deaths: int = 0
    sim_time: float = 0.0  # seconds


@dataclass
class World:
    settings: Settings
    prng: Prng
    bodies: List[Body] = field(default_factory=list)
    motes: MoteSpawner = field(default_factory=MoteSpawner)
    stats: WorldStats = field(default_factory=WorldStats)
    last_time: Optional[float] = None
    ids: Iterator[int] = field(default_factory=lambda: itertools.count(1))

    @staticmethod
    def create(settings: Settings) -> "World":
        prng = Prng(settings.seed)
        ids = itertools.count(1)
        bodies = [get_random_body(settings, prng, ids) for _ in range(settings.start_bodies)]
        logger.info("seeded world %r with %d bodies", settings.seed, len(bodies))
        return World(settings=settings, prng=prng, bodies=bodies, ids=ids)

    def apply_settings(self, settings: Settings) -> None:
        """Swap in a new snapshot; it takes effect on the next update."""
        self.settings = settings

    @property
    def population(self) -> int:
        return sum(1 for b in self.bodies if not b.is_mote)

    @property
    def mote_count(self) -> int:
        return sum(1 for b in self.bodies if b.is_mote)

    def update(self, now: float) -> List[Body]:
        """Advance the world to timestamp ``now`` (ms) and return the new population."""
        if self.last_time is None:
            self.last_time = now
        last_time, self.last_time = self.last_time, now
        dt = max(0.0, now - last_time) / 1000

        before = len(self.bodies)
        alive_before = self.population
        survivors = simulate_frame(self.bodies, last_time, now, self.settings)
        deaths = before - len(survivors)

        children = reproduce(survivors, self.settings, self.prng, self.ids)
        motes = self.motes.update(survivors, dt, self.settings, self.prng, self.ids)
        self.bodies = survivors + children + motes

        self.stats.frames += 1
        self.stats.sim_time += dt
        self.stats.deaths += deaths
        self.stats.births += len(children)

        if children or deaths:
            logger.debug(
                "frame %d: %d born, %d died, %d alive",
                self.stats.frames, len(children), deaths, len(self.bodies),
            )
        if alive_before and not self.population:
            logger.info("population died out after %.1fs", self.stats.sim_time)
        return self.bodies
