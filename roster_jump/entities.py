import math
from enum import Enum

from roster_jump import config as cfg
from roster_jump.collision import center, lands_on, overlaps


class PlatformKind(Enum):
    NORMAL = "normal"
    NIGHT = "night"
    MOVING = "moving"


class BreakState(Enum):
    INTACT = "intact"
    BREAKING = "breaking"
    BROKEN = "broken"


class ObstacleKind(Enum):
    HOLE = "hole"
    FATIGUE = "fatigue"
    DOUBLE = "double"
    BUDGET = "budget"


class ObstacleState(Enum):
    LIVE = "live"
    SPENT = "spent"


class PowerUpKind(Enum):
    MINOR = "movac"
    MAJOR = "rosterlab"

    @property
    def boost(self):
        return cfg.MINOR_BOOST if self is PowerUpKind.MINOR else cfg.MAJOR_BOOST

    @property
    def bonus(self):
        return cfg.MINOR_BONUS if self is PowerUpKind.MINOR else cfg.MAJOR_BONUS


class Player:
    def __init__(self, x=cfg.PLAYER_START_X, y=cfg.PLAYER_START_Y):
        self.x, self.y = float(x), float(y)
        self.width = cfg.PLAYER_WIDTH
        self.height = cfg.PLAYER_HEIGHT
        self.vx = 0.0
        self.vy = 0.0
        self.facing = 1
        self.shoot_cooldown = 0
        self.boost_velocity = 0.0  # smooth power-up launches
        self.frame = 0
        self.anim_timer = 0
        self.prev_bottom = self.bottom

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def center_x(self):
        return self.x + self.width / 2

    def update(self, control, bullets):
        """Physics half of the player's frame: gravity, boost, steering, firing,
        integration and wrap-around. Returns the bullet fired, if any."""
        self.vy += cfg.GRAVITY

        if self.boost_velocity < 0:
            self.vy = self.boost_velocity
            self.boost_velocity += cfg.BOOST_RAMP
            if self.boost_velocity >= 0:
                self.boost_velocity = 0.0

        self.steer(control.horizontal_intent)

        if self.shoot_cooldown > 0:
            self.shoot_cooldown -= 1

        fired = None
        if control.fire and self.shoot_cooldown == 0:
            fired = self.shoot(bullets)
            self.shoot_cooldown = cfg.SHOOT_COOLDOWN

        self.prev_bottom = self.bottom
        self.x += self.vx
        self.y += self.vy

        # Wrap around screen
        if self.x < -self.width:
            self.x = float(cfg.WIDTH)
        elif self.x > cfg.WIDTH:
            self.x = float(-self.width)

        return fired

    def steer(self, intent):
        if abs(intent) < cfg.CONTROL_DEAD_ZONE:
            self.vx *= cfg.FRICTION
            return
        target = intent * cfg.MOVE_SPEED
        self.vx = max(-cfg.MOVE_SPEED, min(cfg.MOVE_SPEED, target))
        self.facing = 1 if self.vx > 0 else -1

    def shoot(self, bullets):
        if len(bullets) >= cfg.MAX_PLAYER_BULLETS:
            return None
        bullet = PlayerBullet(
            self.x + self.width / 2 - cfg.BULLET_WIDTH / 2,
            self.y - cfg.BULLET_HEIGHT,
            0,
            cfg.BULLET_SPEED,
        )
        bullets.append(bullet)
        return bullet

    def land(self, platforms):
        """Bounce on the first platform newly penetrated from above."""
        if self.vy <= 0:
            return None
        for platform in platforms:
            if platform.broken or not lands_on(self, self.prev_bottom, platform):
                continue
            self.y = platform.y - self.height
            self.vy = cfg.JUMP_POWER
            platform.start_breaking()
            return platform
        return None

    def hit_obstacles(self, obstacles):
        """Returns True when a dangerous obstacle was touched."""
        for obstacle in obstacles:
            if obstacle.hit or not overlaps(self, obstacle):
                continue
            if obstacle.kind is ObstacleKind.HOLE:
                self.vy = cfg.HOLE_FALL_VELOCITY
                obstacle.spend()
            else:
                return True
        return False

    def collect(self, power_ups):
        collected = [p for p in power_ups if overlaps(self, p)]
        for power_up in collected:
            self.boost_velocity = float(power_up.kind.boost)
            power_ups.remove(power_up)
        return collected

    def animate(self):
        self.anim_timer += 1
        if self.anim_timer > cfg.ANIM_TICKS:
            self.anim_timer = 0
            self.frame = (self.frame + 1) % 2


class Platform:
    def __init__(self, x, y, label="", kind=PlatformKind.NORMAL, platform_id=None, has_power_up=False):
        self.x, self.y = float(x), float(y)
        self.width = cfg.PLATFORM_WIDTH
        self.height = cfg.PLATFORM_HEIGHT
        self.label = label
        self.kind = PlatformKind(kind)
        self.platform_id = platform_id
        self.is_valid_shift = any(marker in label for marker in cfg.VALID_SHIFT_MARKERS)

        self.break_state = BreakState.INTACT
        self.break_timer = 0

        self.move_direction = 1
        self.move_speed = cfg.PLATFORM_MOVE_SPEED
        self.has_power_up = self.kind is PlatformKind.MOVING and has_power_up

    @staticmethod
    def choose_kind(label, score, rng):
        roll = rng.random()
        if cfg.NIGHT_MARKER in label:
            return PlatformKind.NIGHT
        if roll < cfg.MOVING_PLATFORM_CHANCE and score > cfg.MOVING_PLATFORM_MIN_SCORE:
            return PlatformKind.MOVING
        return PlatformKind.NORMAL

    @property
    def broken(self):
        return self.break_state is BreakState.BROKEN

    @property
    def breaking(self):
        return self.break_state is BreakState.BREAKING

    @property
    def break_progress(self):
        return min(self.break_timer / cfg.NIGHT_BREAK_FRAMES, 1.0)

    def start_breaking(self):
        if self.kind is PlatformKind.NIGHT and self.break_state is BreakState.INTACT:
            self.break_state = BreakState.BREAKING

    def advance_break(self):
        if self.break_state is not BreakState.BREAKING:
            return
        self.break_timer += 1
        if self.break_timer >= cfg.NIGHT_BREAK_FRAMES:
            self.break_state = BreakState.BROKEN

    def update(self):
        if self.kind is PlatformKind.MOVING:
            self.x += self.move_speed * self.move_direction
            if self.x <= cfg.PLATFORM_MIN_X and self.move_direction < 0:
                self.move_direction = 1
            elif self.x + self.width >= cfg.WIDTH and self.move_direction > 0:
                self.move_direction = -1

        if self.kind is PlatformKind.NIGHT:
            self.advance_break()


class Obstacle:
    def __init__(self, x, y, kind, variant=0):
        self.x, self.y = float(x), float(y)
        self.kind = ObstacleKind(kind)
        self.width = cfg.OBSTACLE_SIZE
        self.height = cfg.OBSTACLE_SIZE
        self.state = ObstacleState.LIVE
        self.shoot_timer = 0
        self.variant = variant

    @property
    def hit(self):
        return self.state is ObstacleState.SPENT

    @property
    def shooter(self):
        return self.kind is not ObstacleKind.HOLE and not self.hit

    def spend(self):
        self.state = ObstacleState.SPENT

    def update(self, shoot_interval, player, projectiles):
        if not self.shooter:
            return None
        self.shoot_timer += 1
        if self.shoot_timer >= shoot_interval:
            self.shoot_timer = 0
            return self.shoot(player, projectiles)
        return None

    def shoot(self, player, projectiles):
        if len(projectiles) >= cfg.MAX_PROJECTILES:
            return None

        px, py = center(player)
        ox, oy = center(self)
        dx, dy = px - ox, py - oy
        distance = math.hypot(dx, dy)
        if not 0 < distance < cfg.SHOOT_RANGE:
            return None

        half = cfg.PROJECTILE_SIZE / 2
        projectile = Projectile(
            ox - half,
            oy - half,
            dx / distance * cfg.PROJECTILE_SPEED,
            dy / distance * cfg.PROJECTILE_SPEED,
        )
        projectiles.append(projectile)
        return projectile


class Projectile:
    """Enemy fire, aimed at the player when launched."""

    def __init__(self, x, y, vx, vy):
        self.x, self.y = float(x), float(y)
        self.vx, self.vy = vx, vy
        self.width = cfg.PROJECTILE_SIZE
        self.height = cfg.PROJECTILE_SIZE
        self.active = True

    def update(self, player, camera_y):
        """Returns True when the player was struck."""
        self.x += self.vx
        self.y += self.vy

        struck = player is not None and overlaps(self, player)
        if struck:
            self.active = False

        margin = cfg.PROJECTILE_CULL_MARGIN
        if (self.x < -margin or self.x > cfg.WIDTH + margin
                or self.y < camera_y - margin
                or self.y > camera_y + cfg.HEIGHT + margin):
            self.active = False
        return struck


class PlayerBullet:
    def __init__(self, x, y, vx, vy):
        self.x, self.y = float(x), float(y)
        self.vx, self.vy = vx, vy
        self.width = cfg.BULLET_WIDTH
        self.height = cfg.BULLET_HEIGHT
        self.active = True

    def update(self, obstacles, camera_y):
        """Returns the obstacle this bullet took out, if any."""
        self.x += self.vx
        self.y += self.vy

        struck = None
        for obstacle in obstacles:
            if obstacle.shooter and overlaps(self, obstacle):
                obstacle.spend()
                self.active = False
                struck = obstacle
                break

        if self.y < camera_y - cfg.BULLET_CULL_MARGIN:
            self.active = False
        return struck


class FlyingMonster:
    def __init__(self, x, y, speed, direction, variant=0):
        self.x, self.y = float(x), float(y)
        self.width = cfg.MONSTER_SIZE
        self.height = cfg.MONSTER_SIZE
        self.speed = speed
        self.direction = direction
        self.variant = variant
        self.anim_frame = 0
        self.anim_timer = 0
        self.active = True

    @classmethod
    def spawn(cls, camera_y, rng):
        return cls(
            rng.random() * (cfg.WIDTH - cfg.MONSTER_SIZE),
            camera_y - cfg.MONSTER_SPAWN_OFFSET,
            cfg.MONSTER_MIN_SPEED + rng.random() * cfg.MONSTER_SPEED_RANGE,
            -1 if rng.random() < 0.5 else 1,
            variant=int(rng.random() < 0.5),
        )

    def update(self, camera_y):
        self.x += self.speed * self.direction
        if self.x <= 0 and self.direction < 0:
            self.direction = 1
        elif self.x + self.width >= cfg.WIDTH and self.direction > 0:
            self.direction = -1

        if (self.y > camera_y + cfg.HEIGHT + cfg.MONSTER_CULL_BELOW
                or self.y < camera_y - cfg.MONSTER_CULL_ABOVE):
            self.active = False

        self.anim_timer += 1
        if self.anim_timer > cfg.ANIM_TICKS:
            self.anim_timer = 0
            self.anim_frame = (self.anim_frame + 1) % 2

    def touches(self, player):
        return player is not None and overlaps(self, player)

    def shot_by(self, bullets):
        if not self.active:
            return None
        for bullet in bullets:
            if bullet.active and overlaps(bullet, self):
                self.active = False
                bullet.active = False
                return bullet
        return None


class PowerUp:
    def __init__(self, x, y, kind, attached_platform_id=None):
        self.x, self.y = float(x), float(y)
        self.kind = PowerUpKind(kind)
        self.width = cfg.POWER_UP_SIZE
        self.height = cfg.POWER_UP_SIZE
        self.attached_platform_id = attached_platform_id

    def update(self, platforms_by_id):
        if self.attached_platform_id is None:
            return
        # Platform may already be culled; keep the last known x
        platform = platforms_by_id.get(self.attached_platform_id)
        if platform is not None:
            self.x = platform.x + platform.width / 2 - self.width / 2
