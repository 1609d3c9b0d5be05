import itertools
import logging
import math

import numpy as np

from roster_jump import config as cfg
from roster_jump.controls import ControlSignal
from roster_jump.cues import LoggingCuePlayer
from roster_jump.difficulty import difficulty
from roster_jump.entities import FlyingMonster, Player
from roster_jump.generator import LevelGenerator
from roster_jump.roster import coerce_roster

logger = logging.getLogger(__name__)


class World:
    """Everything one session of the game owns.

    A World is inert until start_session() is called. Each step() runs one
    frame in a fixed order:

    1. player (physics, platforms, obstacles, power-ups, camera, score)
    2. platforms, then attached power-ups
    3. obstacles (shooting)
    4. projectiles, player bullets, flying monsters, each filtered when inactive
    5. flying monster spawn roll
    6. level generation up to the frontier
    7. cull pass

    The session ends at most once; after that step() is a no-op until the
    next start_session().
    """

    def __init__(self, rng=None, cues=None, on_score=None, on_session_end=None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self.cues = cues if cues is not None else LoggingCuePlayer()
        self.on_score = on_score
        self.on_session_end = on_session_end
        self.generator = LevelGenerator(self)
        self._reset_state()

    def _reset_state(self):
        self.player = None
        self.platforms = []
        self.obstacles = []
        self.power_ups = []
        self.projectiles = []
        self.player_bullets = []
        self.flying_monsters = []
        self.camera_y = 0.0
        self.max_height = float(cfg.HEIGHT)
        self.score = 0
        self.roster_data = ()
        self.running = False
        self.end_reason = None
        self.frame = 0
        self._platform_ids = itertools.count()

    # --- Session lifecycle ---

    def start_session(self, roster_data=()):
        self._reset_state()
        self.roster_data = coerce_roster(roster_data)
        self.player = Player()
        self.running = True
        self.generator.populate()
        logger.info(
            "Session started with %d roster rows, %d platforms",
            len(self.roster_data), len(self.platforms),
        )
        self._notify_score()

    def end_session(self, reason):
        """Latch the end of the session. Returns False if already ended."""
        if not self.running:
            return False
        self.running = False
        self.end_reason = reason
        logger.info("Session ended (%s) at frame %d, score %d", reason, self.frame, self.score)
        self._cue("hit")
        if self.on_session_end is not None:
            self.on_session_end(self.score)
        return True

    # --- Scoring ---

    @property
    def difficulty(self):
        return difficulty(self.score)

    # Score is frozen once the session ends
    def award(self, points):
        if points <= 0 or not self.running:
            return
        self.score += points
        self._notify_score()

    def propose_score(self, value):
        # Height polling and bonuses both feed score; keep the max proposal
        if self.running and value > self.score:
            self.score = int(value)
            self._notify_score()

    def height_score(self):
        return max(0, math.floor((-self.max_height + cfg.SCORE_BASELINE) / cfg.HEIGHT_PER_POINT))

    def next_platform_id(self):
        return next(self._platform_ids)

    # --- Frame ---

    def step(self, control=None):
        """Advance one frame. Returns whether the session is still running."""
        if not self.running:
            return False
        if control is None:
            control = ControlSignal.idle()

        self._update_player(control)

        for platform in self.platforms:
            platform.update()

        platforms_by_id = {p.platform_id: p for p in self.platforms}
        for power_up in self.power_ups:
            power_up.update(platforms_by_id)

        if self.running:
            interval = self.difficulty.shoot_interval
            for obstacle in self.obstacles:
                obstacle.update(interval, self.player, self.projectiles)

        self._update_projectiles()
        self._update_player_bullets()
        self._update_flying_monsters()
        self._spawn_flying_monster()

        self.generator.maintain_frontier()
        self._cull()

        self.frame += 1
        return self.running

    def _update_player(self, control):
        player = self.player

        if player.update(control, self.player_bullets) is not None:
            self._cue("shoot")

        platform = player.land(self.platforms)
        if platform is not None:
            if platform.is_valid_shift:
                self.award(cfg.VALID_SHIFT_BONUS)
            self._cue("jump")

        if player.hit_obstacles(self.obstacles):
            self.end_session("obstacle")
            return

        for power_up in player.collect(self.power_ups):
            self.award(power_up.kind.bonus)
            self._cue("powerup")

        # Camera only moves up
        if player.y < self.camera_y + cfg.CAMERA_OFFSET:
            self.camera_y = player.y - cfg.CAMERA_OFFSET

        if player.y < self.max_height:
            self.max_height = player.y
            self.propose_score(self.height_score())

        if player.bottom > self.camera_y + cfg.HEIGHT:
            self.end_session("fell")

        player.animate()

    def _update_projectiles(self):
        for projectile in self.projectiles:
            if projectile.update(self.player, self.camera_y):
                self.end_session("projectile")
        self.projectiles = [p for p in self.projectiles if p.active]

    def _update_player_bullets(self):
        for bullet in self.player_bullets:
            if bullet.update(self.obstacles, self.camera_y) is not None:
                self.award(cfg.OBSTACLE_KILL_BONUS)
        self.player_bullets = [b for b in self.player_bullets if b.active]

    def _update_flying_monsters(self):
        for monster in self.flying_monsters:
            monster.update(self.camera_y)
            if monster.touches(self.player):
                self.end_session("flying monster")
            if monster.shot_by(self.player_bullets) is not None:
                self.award(cfg.MONSTER_KILL_BONUS)
                self._cue("hit")
        self.flying_monsters = [m for m in self.flying_monsters if m.active]

    def flying_monster_chance(self):
        return min(
            cfg.MONSTER_CHANCE_BASE + self.score / 10000 * 0.01,
            cfg.MONSTER_CHANCE_MAX,
        )

    def _spawn_flying_monster(self):
        if self.rng.random() >= self.flying_monster_chance():
            return
        if len(self.flying_monsters) >= cfg.MAX_FLYING_MONSTERS:
            logger.debug("Flying monster spawn refused at cap")
            return
        self.flying_monsters.append(FlyingMonster.spawn(self.camera_y, self.rng))

    def _cull(self):
        limit = self.camera_y + cfg.HEIGHT + cfg.CULL_MARGIN
        self.platforms = [p for p in self.platforms if p.y < limit]
        self.obstacles = [o for o in self.obstacles if o.y < limit]
        self.power_ups = [p for p in self.power_ups if p.y < limit]
        self.projectiles = [p for p in self.projectiles if p.active and p.y < limit]
        self.player_bullets = [b for b in self.player_bullets if b.active and b.y < limit]
        self.flying_monsters = [m for m in self.flying_monsters if m.active and m.y < limit]

    # --- Collaborators ---

    def _notify_score(self):
        if self.on_score is not None:
            self.on_score(self.score)

    def _cue(self, name):
        try:
            self.cues.play(name)
        except Exception:
            logger.exception("Cue player failed on %r", name)

    def counts(self):
        return {
            "platforms": len(self.platforms),
            "obstacles": len(self.obstacles),
            "power_ups": len(self.power_ups),
            "projectiles": len(self.projectiles),
            "player_bullets": len(self.player_bullets),
            "flying_monsters": len(self.flying_monsters),
        }


def step(world, control=None, frames=1):
    """Run up to `frames` frames, stopping early when the session ends."""
    for _ in range(frames):
        if not world.step(control):
            break
    return world.running
