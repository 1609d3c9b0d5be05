import argparse
import logging
import sys

import numpy as np
import pygame

from roster_jump import config as cfg
from roster_jump.controls import ControlSignal, TouchDrag
from roster_jump.render import AssetLibrary, Renderer
from roster_jump.roster import DEMO_ROSTER, parse_roster
from roster_jump.world import World

logger = logging.getLogger("roster_jump")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="roster_jump", description="Bounce up a nurse roster.")
    parser.add_argument("--roster", help="CSV file with one roster row per line")
    parser.add_argument("--assets", help="directory holding an images/ folder")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default="INFO")
    return parser.parse_args(argv)


def load_roster(path):
    if not path:
        return DEMO_ROSTER
    with open(path, encoding="utf-8") as fh:
        return parse_roster(fh.read())


def read_control(world, keys, use_mouse, touch, fire):
    dragged = touch.control(fire)
    if dragged is not None:
        return dragged
    if use_mouse and world.player is not None:
        return ControlSignal.from_pointer(pygame.mouse.get_pos()[0], world.player.center_x, fire)
    return ControlSignal.from_keys(
        keys[pygame.K_LEFT] or keys[pygame.K_a],
        keys[pygame.K_RIGHT] or keys[pygame.K_d],
        fire,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    roster = load_roster(args.roster)
    assets = AssetLibrary(args.assets)
    renderer = Renderer(assets)
    window = pygame.display.set_mode((cfg.WIDTH, cfg.HEIGHT))
    pygame.display.set_caption("Roster Jump")
    loaded = assets.load_all()
    logger.info("Loaded %d of %d images", loaded, len(assets.drawables))
    clock = pygame.time.Clock()

    world = World(rng=np.random.default_rng(args.seed))
    world.start_session(roster)

    use_mouse = False
    touch = TouchDrag()
    running = True
    while running:
        click_fire = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_r and not world.running:
                    world.start_session(roster)
                elif event.key in (pygame.K_LEFT, pygame.K_RIGHT, pygame.K_a, pygame.K_d):
                    use_mouse = False
            elif event.type == pygame.MOUSEMOTION and not getattr(event, "touch", False):
                use_mouse = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and not getattr(event, "touch", False):
                click_fire = True
            elif event.type == pygame.FINGERDOWN:
                touch.begin(event.x * cfg.WIDTH, pygame.time.get_ticks())
            elif event.type == pygame.FINGERMOTION:
                touch.move(event.x * cfg.WIDTH)
            elif event.type == pygame.FINGERUP:
                click_fire = touch.end(pygame.time.get_ticks())

        keys = pygame.key.get_pressed()
        control = read_control(world, keys, use_mouse, touch, keys[pygame.K_SPACE] or click_fire)

        world.step(control)
        window.blit(renderer.draw(world), (0, 0))
        pygame.display.flip()
        clock.tick(cfg.FPS)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
