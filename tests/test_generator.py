from roster_jump import config as cfg
from roster_jump.entities import ObstacleKind, PlatformKind, PowerUpKind
from roster_jump.world import World

from conftest import StubRng


def stub_world(value, score=0):
    world = World(rng=StubRng(value))
    world.running = True
    world.score = score
    return world


def test_moving_platform_with_power_up_skips_other_rolls():
    world = stub_world(0.0, score=100)
    platform = world.generator.generate_platform(-500)
    assert platform.kind is PlatformKind.MOVING
    assert len(world.power_ups) == 1
    power_up = world.power_ups[0]
    assert power_up.attached_platform_id == platform.platform_id
    assert power_up.kind is PowerUpKind.MINOR
    assert power_up.y == -500 - cfg.ATTACHED_POWER_UP_OFFSET_Y
    assert world.obstacles == []


def test_opening_band_is_safe():
    world = stub_world(0.0)
    world.generator.generate_platform(cfg.HEIGHT - 100)
    assert world.obstacles == [] and world.power_ups == []


def test_obstacle_and_free_power_up_above_opening():
    world = stub_world(0.0)
    platform = world.generator.generate_platform(100)
    assert platform.kind is PlatformKind.NORMAL
    assert [o.kind for o in world.obstacles] == [ObstacleKind.HOLE]
    assert world.obstacles[0].y == 100 - cfg.OBSTACLE_OFFSET_Y
    assert len(world.power_ups) == 1
    assert world.power_ups[0].attached_platform_id is None


def test_high_rolls_spawn_nothing_extra():
    world = stub_world(0.99, score=500)
    platform = world.generator.generate_platform(100)
    assert platform.kind is PlatformKind.NORMAL
    assert world.obstacles == [] and world.power_ups == []


def test_night_label_forces_night_platform():
    world = stub_world(0.5)
    world.roster_data = (("RN-Night",),)
    assert world.generator.generate_platform(100).kind is PlatformKind.NIGHT


def test_platform_ids_are_unique():
    world = World(rng=StubRng(0.5))
    world.start_session([])
    ids = [p.platform_id for p in world.platforms]
    assert len(ids) == len(set(ids))
