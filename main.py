"""
Meeba farm: bodies drift, collide, spike each other, split and die in
real time. The window is the frame driver; ``--headless`` runs the same
simulation without one.
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import config
from world.world import World

logger = logging.getLogger("meeba")

FRAME_MS = 1000 / 60


def build_settings(args: argparse.Namespace) -> config.Settings:
    settings = config.Settings(seed=args.seed or config.new_seed())
    for name in ("width", "height", "start_bodies", "temperature", "volatility"):
        value = getattr(args, name)
        if value is not None:
            settings = config.update_setting(settings, name, value)
    return settings


def run_headless(world: World, frames: int) -> None:
    now = 0.0
    world.update(now)
    for _ in range(frames):
        now += FRAME_MS
        world.update(now)

    logger.info(
        "seed %s: %d frames, %.1fs simulated, %d meebas, %d motes, %d births, %d deaths",
        world.settings.seed,
        world.stats.frames,
        world.stats.sim_time,
        world.population,
        world.mote_count,
        world.stats.births,
        world.stats.deaths,
    )


def run_window(world: World) -> None:
    import pygame

    from render import colors
    from render.renderer import draw_body, draw_hud

    pygame.init()
    screen = pygame.display.set_mode((world.settings.width, world.settings.height))
    pygame.display.set_caption(f"meeba farm ({world.settings.seed})")
    clock = pygame.time.Clock()

    debug = False
    paused = False
    running = True
    sim_now = 0.0
    world.update(sim_now)

    while running:
        dt_ms = min(clock.tick(60), 1000 / 30)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_TAB:
                debug = not debug
            elif e.type == pygame.KEYDOWN and e.key == pygame.K_SPACE:
                paused = not paused

        if not paused:
            sim_now += dt_ms
            world.update(sim_now)

        screen.fill(colors.BG)
        for body in world.bodies:
            draw_body(screen, body, sim_now, debug=debug)

        draw_hud(screen, {
            "population": world.population,
            "motes": world.mote_count,
            "births": world.stats.births,
            "deaths": world.stats.deaths,
            "seed": world.settings.seed,
            "sim_time": world.stats.sim_time,
        })
        pygame.display.flip()

    pygame.quit()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Meeba farm simulation")
    parser.add_argument("--seed", help="base-36 seed, random if omitted")
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    parser.add_argument("--start-bodies", dest="start_bodies", type=int)
    parser.add_argument("--temperature", type=float)
    parser.add_argument("--volatility", type=float)
    parser.add_argument("--headless", type=int, metavar="FRAMES", help="run N frames without a window")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    world = World.create(build_settings(args))
    if args.headless is not None:
        run_headless(world, args.headless)
    else:
        run_window(world)


if __name__ == "__main__":
    main()
