"""
meeba module: world/physics.py

Top-down 2D circle physics, one frame at a time:
- bodies travel along their heading (angles in turns)
- walls reflect the heading and clamp the position; speed is kept
- overlapping pairs are pushed apart, with a bounded number of passes
- pairs left in contact resolve as a 2D elastic collision by mass
- upkeep is burned, spike tips inside a rival drain its calories
- dead bodies are dropped, bodies over their spawn threshold are flagged
"""

from __future__ import annotations
import logging
import math
from typing import Iterable, List, Optional

from config import Settings
from meeba import turns
from meeba.body import Body
from meeba.vitals import add_calories, drain_calories

logger = logging.getLogger(__name__)

# extra push so floating point error never leaves a pair a hair inside
SEPARATION_SLOP = 1e-6
# separated pairs sit exactly in contact, so contact allows a little slack
CONTACT_TOLERANCE = 1e-3


def integrate(body: Body, dt: float) -> None:
    dx, dy = turns.to_vector(body.velocity.angle, body.velocity.speed * dt)
    body.meta.next_x = body.x + dx
    body.meta.next_y = body.y + dy


def bounce_walls(body: Body, width: float, height: float) -> None:
    """Keep the candidate position in the arena, reflecting heading into a crossed wall."""
    meta = body.meta
    r = body.radius

    if meta.next_x < r:
        if turns.cos(body.velocity.angle) < 0:
            body.velocity.angle = turns.bounce_x(body.velocity.angle)
        meta.next_x = r
    elif meta.next_x > width - r:
        if turns.cos(body.velocity.angle) > 0:
            body.velocity.angle = turns.bounce_x(body.velocity.angle)
        meta.next_x = width - r

    # screen y grows downward, heading y is -sin
    if meta.next_y < r:
        if turns.sin(body.velocity.angle) > 0:
            body.velocity.angle = turns.bounce_y(body.velocity.angle)
        meta.next_y = r
    elif meta.next_y > height - r:
        if turns.sin(body.velocity.angle) < 0:
            body.velocity.angle = turns.bounce_y(body.velocity.angle)
        meta.next_y = height - r


def is_touching(a: Body, b: Body) -> bool:
    reach = a.radius + b.radius + CONTACT_TOLERANCE
    dx = b.x - a.x
    dy = b.y - a.y
    return dx * dx + dy * dy < reach * reach


def collide(a: Body, b: Body) -> bool:
    """
    Elastic collision between two circles, exchanging momentum along the
    line between centers. Tangential velocity is untouched.

    Returns False (and changes nothing) if the centers coincide or the
    bodies are already moving apart.
    """
    nx = b.x - a.x
    ny = b.y - a.y
    dist = math.hypot(nx, ny)
    if dist <= 0:
        return False

    un_x, un_y = nx / dist, ny / dist
    ut_x, ut_y = -un_y, un_x

    v1x, v1y = turns.to_vector(a.velocity.angle, a.velocity.speed)
    v2x, v2y = turns.to_vector(b.velocity.angle, b.velocity.speed)

    vn1 = un_x * v1x + un_y * v1y
    vt1 = ut_x * v1x + ut_y * v1y
    vn2 = un_x * v2x + un_y * v2y
    vt2 = ut_x * v2x + ut_y * v2y

    if vn1 - vn2 <= 0:
        return False

    m1, m2 = a.mass, b.mass
    total = m1 + m2
    if total <= 0:
        return False
    vn1_f = (vn1 * (m1 - m2) + 2 * m2 * vn2) / total
    vn2_f = (vn2 * (m2 - m1) + 2 * m1 * vn1) / total

    a.velocity.angle, a.velocity.speed = turns.from_vector(
        vn1_f * un_x + vt1 * ut_x,
        vn1_f * un_y + vt1 * ut_y,
    )
    b.velocity.angle, b.velocity.speed = turns.from_vector(
        vn2_f * un_x + vt2 * ut_x,
        vn2_f * un_y + vt2 * ut_y,
    )
    return True


def resolve_collisions(bodies: List[Body]) -> int:
    """
    Collide every newly touching pair. A pair that collided last frame and
    is still in contact is skipped. Returns the number of collisions.
    """
    collisions = 0
    for i in range(len(bodies)):
        a = bodies[i]
        for j in range(i + 1, len(bodies)):
            b = bodies[j]

            if not is_touching(a, b):
                if a.meta.last_collision_id == b.id:
                    a.meta.last_collision_id = None
                if b.meta.last_collision_id == a.id:
                    b.meta.last_collision_id = None
                continue

            if a.meta.last_collision_id == b.id or b.meta.last_collision_id == a.id:
                continue

            if collide(a, b):
                a.meta.last_collision_id = b.id
                b.meta.last_collision_id = a.id
                collisions += 1
    return collisions


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def separate_bodies(
    bodies: List[Body],
    width: Optional[float] = None,
    height: Optional[float] = None,
    passes: int = 8,
) -> bool:
    """
    Push overlapping bodies apart along the line between their centers.
    Each body moves by its partner's share of the pair's mass, so the
    lighter one gives way more. With ``width``/``height`` the bodies are
    also kept inside the arena.

    Stops after ``passes`` passes even if some pairs still overlap (for
    example, bodies too big for the arena). Returns False when it ran
    out of passes.
    """
    for _ in range(max(1, passes)):
        moved = False
        for i in range(len(bodies)):
            a = bodies[i]
            for j in range(i + 1, len(bodies)):
                b = bodies[j]
                reach = a.radius + b.radius
                dx = b.x - a.x
                dy = b.y - a.y
                dist = math.hypot(dx, dy)
                if dist >= reach:
                    continue

                if dist > 0:
                    un_x, un_y = dx / dist, dy / dist
                else:
                    un_x, un_y = 1.0, 0.0

                overlap = reach - dist + SEPARATION_SLOP
                total_mass = a.mass + b.mass
                share_a = b.mass / total_mass if total_mass > 0 else 0.5

                a.x -= un_x * overlap * share_a
                a.y -= un_y * overlap * share_a
                b.x += un_x * overlap * (1 - share_a)
                b.y += un_y * overlap * (1 - share_a)
                moved = True

        if width is not None and height is not None:
            for body in bodies:
                body.x = _clamp(body.x, body.radius, width - body.radius)
                body.y = _clamp(body.y, body.radius, height - body.radius)

        if not moved:
            return True

    logger.debug("separate_bodies gave up after %d passes with %d bodies", passes, len(bodies))
    return False


def burn_upkeep(bodies: Iterable[Body], dt: float) -> None:
    for body in bodies:
        if body.vitals.upkeep:
            drain_calories(body.vitals, body.vitals.upkeep * dt)


def drain_spikes(bodies: List[Body], dt: float, now: float, cooldown: float) -> float:
    """
    Every active spike whose tip sits inside a rival drains it at the
    spike's rate. The attacker gains whatever was actually drained.
    Returns total calories moved.
    """
    total = 0.0
    for attacker in bodies:
        if not attacker.spikes or attacker.vitals.is_dead:
            continue
        for spike in attacker.spikes:
            if not spike.is_active(now):
                continue
            spike.deactivate_time = None

            tip_x, tip_y = spike.tip
            for victim in bodies:
                if victim is attacker or victim.vitals.is_dead:
                    continue
                dx = tip_x - victim.x
                dy = tip_y - victim.y
                if dx * dx + dy * dy >= victim.radius * victim.radius:
                    continue

                drained = drain_calories(victim.vitals, spike.drain * dt)
                if drained > 0:
                    add_calories(attacker.vitals, drained)
                    spike.deactivate_time = now + cooldown
                    total += drained
                break
    return total


def _forget_stale_collisions(bodies: List[Body]) -> None:
    live = {body.id for body in bodies}
    for body in bodies:
        if body.meta.last_collision_id is not None and body.meta.last_collision_id not in live:
            body.meta.last_collision_id = None


def simulate_frame(bodies: List[Body], last_time: float, now: float, settings: Settings) -> List[Body]:
    """
    Advance ``bodies`` from ``last_time`` to ``now`` (milliseconds).

    Bodies are updated in place; the returned list holds the survivors and
    is the authoritative population from here on. Survivors at or above
    their spawn threshold have ``meta.spawn_ready`` set.
    """
    dt = max(0.0, now - last_time) / 1000
    width, height = settings.width, settings.height

    _forget_stale_collisions(bodies)

    for body in bodies:
        integrate(body, dt)
        bounce_walls(body, width, height)
        body.x = body.meta.next_x
        body.y = body.meta.next_y

    separate_bodies(bodies, width, height, passes=settings.separation_passes)
    resolve_collisions(bodies)

    for body in bodies:
        body.move_to(body.x, body.y)

    burn_upkeep(bodies, dt)
    drain_spikes(bodies, dt, now, settings.spike_cooldown)

    survivors = [body for body in bodies if not body.vitals.is_dead]
    for body in survivors:
        body.meta.spawn_ready = body.vitals.is_spawn_ready
    return survivors
