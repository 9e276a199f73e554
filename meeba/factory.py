"""
meeba module: meeba/factory.py

Body construction. Three kinds of body come out of here:
- random bodies grown from a fresh genome
- children replicated (and mutated) from a parent
- motes: passive, spikeless food particles

Ids come from the caller's counter (one per world), so two runs with the
same seed hand out the same ids.
"""

from __future__ import annotations
import math
import sys
from typing import Iterator

from config import Settings
from evolution.mutate import replicate_genome
from meeba import turns
from meeba.body import Body, Velocity
from meeba.genome import create_genome, from_hex, read_genome, to_hex
from meeba.prng import Prng
from meeba.spikes import spawn_spike
from meeba.vitals import Vitals, init_vitals, set_calories
from render.colors import hue_to_fill

MOTE_DIES_AT = 1


def radius_for_mass(mass: float) -> int:
    return math.floor(math.sqrt(mass / math.pi))


def init_body(genome: bytes, settings: Settings, body_id: int = 0) -> Body:
    """Build a body at the origin, at rest, from a genome."""
    commands = read_genome(genome, settings)
    mass = settings.min_mass + commands.size
    radius = radius_for_mass(mass)

    spikes = sorted(
        (spawn_spike(radius, cmd.angle, cmd.length, settings) for cmd in commands.spikes),
        key=lambda spike: spike.length,
        reverse=True,
    )

    return Body(
        id=body_id,
        dna=to_hex(genome),
        fill=hue_to_fill(commands.hue),
        x=0.0,
        y=0.0,
        mass=mass,
        radius=radius,
        vitals=init_vitals(mass, spikes, settings),
        spikes=spikes,
    )


def get_random_body(settings: Settings, prng: Prng, ids: Iterator[int]) -> Body:
    body = init_body(create_genome(settings, prng), settings, next(ids))

    body.move_to(
        prng.rand_int(body.radius, settings.width - body.radius),
        prng.rand_int(body.radius, settings.height - body.radius),
    )
    body.velocity.angle = prng.rand()
    body.velocity.speed = prng.rand_int(0, settings.max_energy / body.mass)
    return body


def replicate_parent(parent: Body, angle: float, settings: Settings, prng: Prng, ids: Iterator[int]) -> Body:
    """
    Child of ``parent`` launched along ``angle``. The child starts with half
    the parent's calories; the parent itself is not modified.
    """
    angle = turns.round_angle(angle)
    genome = replicate_genome(from_hex(parent.dna), settings, prng)
    body = init_body(genome, settings, next(ids))
    body.fill = parent.fill

    set_calories(body.vitals, math.floor(parent.vitals.calories / 2))

    dx, dy = turns.to_vector(angle, 2 * body.radius)
    body.velocity.angle = angle
    body.velocity.speed = parent.velocity.speed + prng.rand_int(0, settings.max_spawning_energy / body.mass)
    body.move_to(parent.x + dx, parent.y + dy)
    return body


def spawn_mote(settings: Settings, prng: Prng, ids: Iterator[int]) -> Body:
    radius = settings.mote_radius
    return Body(
        id=next(ids),
        dna="",
        fill=settings.mote_color,
        x=prng.rand_int(radius, settings.mote_border_right),
        y=prng.rand_int(radius, settings.mote_border_bottom),
        mass=settings.mote_mass,
        radius=radius,
        velocity=Velocity(angle=prng.rand(), speed=prng.rand_int(0, settings.mote_max_speed)),
        vitals=Vitals(
            calories=settings.mote_starting_calories,
            upkeep=0,
            dies_at=MOTE_DIES_AT,
            spawns_at=sys.maxsize,
        ),
    )
