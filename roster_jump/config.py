# --- Screen ---
WIDTH, HEIGHT = 450, 700
FPS = 60
CELL_SIZE = 60
ROW_HEADER_WIDTH = 40
GRID_ROW_HEIGHT = 25

# --- Physics ---
GRAVITY = 0.4
JUMP_POWER = -13  # auto-bounce on landing
MOVE_SPEED = 3
FRICTION = 0.8
CONTROL_DEAD_ZONE = 0.01
BOOST_RAMP = 0.5
HOLE_FALL_VELOCITY = 5

# --- Player ---
PLAYER_WIDTH = 60
PLAYER_HEIGHT = 60
PLAYER_START_X = WIDTH / 2 - 30
PLAYER_START_Y = HEIGHT - 140
SHOOT_COOLDOWN = 12  # 200ms at 60fps
ANIM_TICKS = 10

# --- Camera / scoring ---
CAMERA_OFFSET = 350
SCORE_BASELINE = 600
HEIGHT_PER_POINT = 50
VALID_SHIFT_BONUS = 5
OBSTACLE_KILL_BONUS = 10
MONSTER_KILL_BONUS = 15

# --- Platforms ---
PLATFORM_WIDTH = CELL_SIZE
PLATFORM_HEIGHT = 10
PLATFORM_GAP = 65
INITIAL_PLATFORMS = 15
PLATFORM_MOVE_SPEED = 1.5
PLATFORM_MIN_X = ROW_HEADER_WIDTH
NIGHT_BREAK_FRAMES = 60
MOVING_PLATFORM_CHANCE = 0.15
MOVING_PLATFORM_MIN_SCORE = 30
MOVING_POWER_UP_CHANCE = 0.2
VALID_SHIFT_MARKERS = ("7-15", "RN-")
NIGHT_MARKER = "Night"
START_LABEL = "START"

# --- Obstacles / projectiles ---
OBSTACLE_SIZE = 60
OBSTACLE_OFFSET_Y = 70
SHOOT_RANGE = 500
PROJECTILE_SIZE = 10
PROJECTILE_SPEED = 3
BULLET_WIDTH = 6
BULLET_HEIGHT = 10
BULLET_SPEED = -12

# --- Flying monsters ---
MONSTER_SIZE = 70
MONSTER_MIN_SPEED = 1.5
MONSTER_SPEED_RANGE = 1.5
MONSTER_SPAWN_OFFSET = 50
MONSTER_CHANCE_BASE = 0.005
MONSTER_CHANCE_MAX = 0.015

# --- Power-ups ---
POWER_UP_SIZE = 40
POWER_UP_OFFSET_Y = 50
ATTACHED_POWER_UP_OFFSET_Y = 45
MINOR_POWER_UP_SHARE = 0.7
MINOR_BOOST = -15
MINOR_BONUS = 10
MAJOR_BOOST = -25
MAJOR_BONUS = 20

# --- Generation / lifecycle ---
SAFE_START_DISTANCE = 200
FRONTIER_MARGIN = 400
MAX_PLATFORMS_PER_FRAME = 5
CULL_MARGIN = 100
BULLET_CULL_MARGIN = 50
PROJECTILE_CULL_MARGIN = 50
MONSTER_CULL_BELOW = 100
MONSTER_CULL_ABOVE = 200

# --- Resource caps ---
MAX_PLAYER_BULLETS = 20
MAX_PROJECTILES = 50
MAX_FLYING_MONSTERS = 3

FALLBACK_LABELS = ("", "", "7-15", "RN-Day", "RN-Night", "OFF", "Break", "15-23")
