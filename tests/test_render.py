import logging

import numpy as np
import pygame

from roster_jump import config as cfg
from roster_jump.entities import FlyingMonster, Obstacle, PlayerBullet, PowerUp, PowerUpKind, Projectile
from roster_jump.render import AssetLibrary, Drawable, Renderer
from roster_jump.roster import DEMO_ROSTER


def populated(world):
    world.start_session(DEMO_ROSTER)
    player = world.player
    world.obstacles.append(Obstacle(50, 200, "hole"))
    world.obstacles.append(Obstacle(150, 200, "budget"))
    world.power_ups.append(PowerUp(300, 300, PowerUpKind.MAJOR))
    world.projectiles.append(Projectile(100, 400, 0, 1))
    world.player_bullets.append(PlayerBullet(player.x, player.y - 20, 0, -12))
    world.flying_monsters.append(FlyingMonster(20, 50, 2.0, -1))
    world.platforms[0].start_breaking()
    return world


def test_draw_produces_frame(world):
    renderer = Renderer()
    surface = renderer.draw(populated(world))
    assert surface.get_size() == (cfg.WIDTH, cfg.HEIGHT)
    frame = renderer.to_array()
    assert frame.shape == (cfg.HEIGHT, cfg.WIDTH, 3)
    assert frame.dtype == np.uint8


def test_draw_does_not_touch_simulation_state(world):
    populated(world)
    before = (world.score, world.camera_y, world.player.x, world.player.y, world.counts())
    Renderer().draw(world)
    assert (world.score, world.camera_y, world.player.x, world.player.y, world.counts()) == before


def test_game_over_overlay(world):
    renderer = Renderer()
    world.start_session([])
    renderer.draw(world)
    live = renderer.to_array().mean()
    world.end_session("test")
    renderer.draw(world)
    assert renderer.to_array().mean() < live


def test_missing_asset_falls_back(tmp_path, caplog):
    assets = AssetLibrary(str(tmp_path))
    with caplog.at_level(logging.WARNING, logger="roster_jump.render"):
        assert assets.load_all() == 0
    assert "Failed to load asset" in caplog.text
    assert not assets.get("player").is_ready()
    # A failed load is not retried
    assert assets.get("player").load() is False


def test_drawable_loads_image(tmp_path):
    path = tmp_path / "dot.png"
    pygame.image.save(pygame.Surface((4, 4)), str(path))
    drawable = Drawable(str(path))
    assert drawable.load()
    assert drawable.is_ready()


def test_unknown_asset_is_placeholder():
    assert not AssetLibrary().get("nope").is_ready()
