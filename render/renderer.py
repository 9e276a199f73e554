"""
meeba module: render/renderer.py

Pygame rendering of bodies, spikes and the HUD.
"""

from __future__ import annotations
import pygame

from meeba.body import Body
from meeba.spikes import Spike
from render import colors


def draw_spike(screen: pygame.Surface, spike: Spike, now: float) -> None:
    col = colors.SPIKE if spike.is_active(now) else colors.HIT_SPIKE
    pygame.draw.polygon(screen, col, [spike.tip, spike.base_a, spike.base_b])


def draw_body(screen: pygame.Surface, body: Body, now: float, debug: bool = False) -> None:
    # spikes first so the body covers their bases
    for spike in body.spikes:
        draw_spike(screen, spike, now)

    center = (int(body.x), int(body.y))
    pygame.draw.circle(screen, colors.fill_to_rgb(body.fill), center, int(body.radius))
    if not body.is_mote:
        pygame.draw.circle(screen, colors.OUTLINE, center, int(body.radius), 1)

    if debug and not body.is_mote:
        font = pygame.font.Font(None, 16)
        txt = font.render(f"{int(body.vitals.calories)}/{int(body.vitals.spawns_at)}", True, colors.HUD)
        screen.blit(txt, (body.x + body.radius + 2, body.y - body.radius - 2))


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 26)

    lines = [
        f"Meebas: {stats.get('population', 0)}  Motes: {stats.get('motes', 0)}",
        f"Births: {stats.get('births', 0)}  Deaths: {stats.get('deaths', 0)}",
        f"Seed: {stats.get('seed', '')}",
        f"Sim time: {stats.get('sim_time', 0.0):.1f}s",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD)
        screen.blit(txt, (12, y))
        y += 22
