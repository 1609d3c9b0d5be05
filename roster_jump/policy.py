from roster_jump.controls import MOVE_LEFT, MOVE_NONE, MOVE_RIGHT
from roster_jump.entities import PlatformKind

ALIGN_TOLERANCE = 4


def policy(env):
    # Strategy: while falling, steer under the nearest intact platform at or below the
    # feet so the auto-bounce triggers; while rising, line up with the nearest one above.
    # Night platforms are only used when nothing else is in reach. Shoot whenever a
    # live shooter or flying monster is directly overhead.
    world = env.world
    player = world.player
    if player is None or not world.running:
        return [MOVE_NONE, 0, 0]

    feet = player.bottom
    cx = player.center_x

    if player.vy > 0:
        pool = [p for p in world.platforms if not p.broken and p.y >= feet]
        distance = lambda p: p.y - feet
    else:
        pool = [p for p in world.platforms if not p.broken and p.y < feet]
        distance = lambda p: feet - p.y

    target = None
    if pool:
        safe = [p for p in pool if p.kind is not PlatformKind.NIGHT] or pool
        target = min(safe, key=lambda p: (distance(p), abs(p.x + p.width / 2 - cx)))

    movement = MOVE_NONE
    if target is not None:
        dx = target.x + target.width / 2 - cx
        if dx < -ALIGN_TOLERANCE:
            movement = MOVE_LEFT
        elif dx > ALIGN_TOLERANCE:
            movement = MOVE_RIGHT

    threats = [o for o in world.obstacles if o.shooter] + list(world.flying_monsters)
    fire = any(
        t.y < player.y and t.x <= cx <= t.x + t.width
        for t in threats
    )

    return [movement, int(fire), 0]
