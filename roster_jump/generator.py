import logging

from roster_jump import config as cfg
from roster_jump.entities import Obstacle, Platform, PlatformKind, PowerUp, PowerUpKind
from roster_jump.roster import pick_label

logger = logging.getLogger(__name__)


class LevelGenerator:
    """Builds the level upward from roster labels as the player climbs."""

    def __init__(self, world):
        self.world = world

    def populate(self):
        """Opening layout: a column of platforms plus a safe START cell."""
        for i in range(cfg.INITIAL_PLATFORMS):
            self.generate_platform(cfg.HEIGHT - i * cfg.PLATFORM_GAP)

        start = Platform(
            cfg.WIDTH / 2 - 30,
            cfg.HEIGHT - 60,
            cfg.START_LABEL,
            PlatformKind.NORMAL,
            platform_id=self.world.next_platform_id(),
        )
        self.world.platforms.append(start)

    def generate_platform(self, y):
        world = self.world
        rng = world.rng

        x = rng.random() * (cfg.WIDTH - cfg.CELL_SIZE)
        label = pick_label(world.roster_data, rng)
        kind = Platform.choose_kind(label, world.score, rng)
        has_power_up = kind is PlatformKind.MOVING and rng.random() < cfg.MOVING_POWER_UP_CHANCE

        platform = Platform(
            x, y, label, kind,
            platform_id=world.next_platform_id(),
            has_power_up=has_power_up,
        )
        world.platforms.append(platform)

        if platform.has_power_up:
            power_up = PowerUp(
                platform.x + platform.width / 2 - cfg.POWER_UP_SIZE / 2,
                y - cfg.ATTACHED_POWER_UP_OFFSET_Y,
                self._power_up_kind(),
                attached_platform_id=platform.platform_id,
            )
            world.power_ups.append(power_up)
            return platform

        safe = y >= cfg.HEIGHT - cfg.SAFE_START_DISTANCE
        params = world.difficulty

        if rng.random() < params.monster_chance and not safe:
            obstacle_kind = params.monster_types[rng.integers(0, len(params.monster_types))]
            world.obstacles.append(Obstacle(
                rng.random() * (cfg.WIDTH - cfg.OBSTACLE_SIZE),
                y - cfg.OBSTACLE_OFFSET_Y,
                obstacle_kind,
                variant=int(rng.random() < 0.5),
            ))

        if rng.random() < params.power_up_chance and not safe:
            world.power_ups.append(PowerUp(
                rng.random() * (cfg.WIDTH - cfg.POWER_UP_SIZE),
                y - cfg.POWER_UP_OFFSET_Y,
                self._power_up_kind(),
            ))

        return platform

    def frontier(self):
        if not self.world.platforms:
            return None
        return min(p.y for p in self.world.platforms)

    def maintain_frontier(self):
        """Keep platforms generated a margin above the best height reached."""
        generated = 0
        while generated < cfg.MAX_PLATFORMS_PER_FRAME:
            highest = self.frontier()
            if highest is None or highest <= self.world.max_height - cfg.FRONTIER_MARGIN:
                break
            self.generate_platform(highest - cfg.PLATFORM_GAP)
            generated += 1
        if generated == cfg.MAX_PLATFORMS_PER_FRAME:
            logger.debug("Generation capped at %d platforms this frame", generated)
        return generated

    def _power_up_kind(self):
        if self.world.rng.random() < cfg.MINOR_POWER_UP_SHARE:
            return PowerUpKind.MINOR
        return PowerUpKind.MAJOR
