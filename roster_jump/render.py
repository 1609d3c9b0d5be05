import logging
import os

import numpy as np
import pygame
import pygame.gfxdraw

from roster_jump import config as cfg
from roster_jump.collision import to_rect
from roster_jump.difficulty import difficulty_tier
from roster_jump.entities import ObstacleKind, PlatformKind, PowerUpKind

logger = logging.getLogger(__name__)

ASSET_FILES = {
    "player": os.path.join("images", "player.png"),
    "monster_0": os.path.join("images", "monster_a.jpg"),
    "monster_1": os.path.join("images", "monster_b.png"),
    "movac": os.path.join("images", "movac.jpeg"),
    "rosterlab": os.path.join("images", "rosterlab.png"),
}

OBSTACLE_LABELS = {
    ObstacleKind.FATIGUE: "Fatigue Rule",
    ObstacleKind.DOUBLE: "Double Shift",
    ObstacleKind.BUDGET: "Over Budget",
}


class Drawable:
    """Handle on an image that may not be available yet.

    Simulation code never looks at this; only the renderer asks is_ready()
    to choose between the image and placeholder geometry.
    """

    def __init__(self, path=None):
        self.path = path
        self.image = None
        self.failed = False

    def is_ready(self):
        return self.image is not None

    def load(self):
        if self.is_ready() or self.failed or self.path is None:
            return self.is_ready()
        try:
            self.image = pygame.image.load(self.path)
        except (pygame.error, OSError) as exc:
            self.failed = True
            logger.warning("Failed to load asset %s: %s", self.path, exc)
        return self.is_ready()


class AssetLibrary:
    def __init__(self, assets_dir=None):
        self.assets_dir = assets_dir
        self.drawables = {}
        for name, relative in ASSET_FILES.items():
            path = os.path.join(assets_dir, relative) if assets_dir else None
            self.drawables[name] = Drawable(path)

    def load_all(self):
        return sum(1 for d in self.drawables.values() if d.load())

    def get(self, name):
        return self.drawables.get(name) or Drawable()


class Renderer:
    # Colors
    COLOR_BG = (250, 250, 250)
    COLOR_HEADER = (240, 240, 240)
    COLOR_HEADER_TEXT = (80, 80, 80)
    COLOR_GRID = (208, 208, 208)
    COLOR_HEADER_BORDER = (176, 176, 176)
    COLOR_PLATFORM_NORMAL = (46, 125, 50)
    COLOR_PLATFORM_MOVING = (25, 118, 210)
    COLOR_PLATFORM_BORDER = (153, 153, 153)
    COLOR_NIGHT_BORDER = (51, 51, 51)
    COLOR_CRACK = (255, 0, 0)
    COLOR_LABEL = (255, 255, 255)
    COLOR_LABEL_SHADOW = (60, 60, 60)
    COLOR_HOLE = (102, 102, 102)
    COLOR_MONSTER = (255, 68, 68)
    COLOR_FLYER = (156, 39, 176)
    COLOR_PLAYER = (74, 144, 226)
    COLOR_BULLET = (0, 255, 0)
    COLOR_PROJECTILE = (255, 0, 0)
    COLOR_PROJECTILE_RIM = (255, 102, 102)
    COLOR_MOVAC = (255, 152, 0)
    COLOR_ROSTERLAB = (33, 150, 243)
    COLOR_TEXT = (30, 30, 30)
    COLOR_HINT = (90, 90, 90)

    def __init__(self, assets=None, width=cfg.WIDTH, height=cfg.HEIGHT):
        pygame.init()
        pygame.font.init()
        self.width, self.height = width, height
        self.screen = pygame.Surface((width, height))
        self.assets = assets if assets is not None else AssetLibrary()
        self.font_label = pygame.font.SysFont("monospace", 10, bold=True)
        self.font_small = pygame.font.SysFont("monospace", 11)
        self.font_ui = pygame.font.SysFont("monospace", 16, bold=True)
        self.font_big = pygame.font.SysFont("monospace", 36, bold=True)

    def draw(self, world):
        cam = world.camera_y
        self._render_background(cam)
        self._render_game(world, cam)
        self._render_ui(world)
        return self.screen

    def to_array(self):
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    # --- Background: a roster spreadsheet scrolling with the camera ---

    def _render_background(self, cam):
        self.screen.fill(self.COLOR_BG)
        pygame.draw.rect(self.screen, self.COLOR_HEADER, (0, 0, cfg.ROW_HEADER_WIDTH, self.height))

        row_h = cfg.GRID_ROW_HEIGHT
        start_y = int(cam // row_h) * row_h
        for y in range(start_y, int(start_y + self.height + row_h * 2), row_h):
            screen_y = int(y - cam)
            pygame.draw.line(self.screen, self.COLOR_GRID, (0, screen_y), (self.width, screen_y))
            row_num = -y // row_h + 50
            if row_num > 0:
                text = self.font_small.render(str(row_num), True, self.COLOR_HEADER_TEXT)
                self.screen.blit(text, text.get_rect(center=(cfg.ROW_HEADER_WIDTH // 2, screen_y + row_h // 2)))

        for x in range(cfg.ROW_HEADER_WIDTH, self.width + 1, cfg.CELL_SIZE):
            pygame.draw.line(self.screen, self.COLOR_GRID, (x, 0), (x, self.height))
        pygame.draw.line(self.screen, self.COLOR_HEADER_BORDER, (cfg.ROW_HEADER_WIDTH, 0), (cfg.ROW_HEADER_WIDTH, self.height), 2)

        # Column header row sits just above the world origin
        header_y = int(-cam - row_h)
        if -row_h < header_y < self.height:
            pygame.draw.rect(self.screen, self.COLOR_HEADER, (0, header_y, self.width, row_h))
            for i, letter in enumerate("ABCDEF"):
                text = self.font_ui.render(letter, True, self.COLOR_HEADER_TEXT)
                cx = cfg.ROW_HEADER_WIDTH + i * cfg.CELL_SIZE + cfg.CELL_SIZE // 2
                self.screen.blit(text, text.get_rect(center=(cx, header_y + row_h // 2)))

    # --- World ---

    def _render_game(self, world, cam):
        for platform in world.platforms:
            self._draw_platform(platform, cam)
        for obstacle in world.obstacles:
            self._draw_obstacle(obstacle, cam)
        for power_up in world.power_ups:
            self._draw_power_up(power_up, cam)
        for projectile in world.projectiles:
            rect = to_rect(projectile, cam)
            pygame.gfxdraw.filled_circle(self.screen, rect.centerx, rect.centery, rect.width // 2, self.COLOR_PROJECTILE)
            pygame.gfxdraw.aacircle(self.screen, rect.centerx, rect.centery, rect.width // 2, self.COLOR_PROJECTILE_RIM)
        for bullet in world.player_bullets:
            pygame.draw.rect(self.screen, self.COLOR_BULLET, to_rect(bullet, cam))
        for monster in world.flying_monsters:
            self._draw_flying_monster(monster, cam)
        if world.player is not None:
            self._draw_player(world.player, cam)

    def _draw_platform(self, platform, cam):
        if platform.broken:
            return
        rect = to_rect(platform, cam)
        if platform.kind is PlatformKind.NIGHT:
            color = (int(255 * platform.break_progress), 0, 0)
            border = self.COLOR_NIGHT_BORDER
        elif platform.kind is PlatformKind.MOVING:
            color, border = self.COLOR_PLATFORM_MOVING, self.COLOR_PLATFORM_BORDER
        else:
            color, border = self.COLOR_PLATFORM_NORMAL, self.COLOR_PLATFORM_BORDER
        pygame.draw.rect(self.screen, color, rect)
        pygame.draw.rect(self.screen, border, rect, 2)

        if platform.label:
            text = self.font_label.render(platform.label, True, self.COLOR_LABEL_SHADOW)
            self.screen.blit(text, text.get_rect(midbottom=(rect.centerx, rect.top - 2)))

        if platform.breaking:
            for frac, lean in ((0.3, -5), (0.7, 5)):
                x = rect.left + int(rect.width * frac)
                pygame.draw.line(self.screen, self.COLOR_CRACK, (x, rect.top), (x + lean, rect.bottom), 2)

    def _draw_obstacle(self, obstacle, cam):
        rect = to_rect(obstacle, cam)
        if obstacle.kind is ObstacleKind.HOLE:
            self._draw_dashed_rect(rect, self.COLOR_HOLE)
            pygame.draw.rect(self.screen, self.COLOR_BG, rect.inflate(-10, -10))
            return

        drawable = self.assets.get(f"monster_{obstacle.variant}")
        if drawable.is_ready():
            self.screen.blit(pygame.transform.scale(drawable.image, rect.size), rect)
        else:
            pygame.gfxdraw.filled_circle(self.screen, rect.left + 20, rect.top + 20, 18, self.COLOR_MONSTER)
            mark = self.font_ui.render("!", True, self.COLOR_LABEL)
            self.screen.blit(mark, mark.get_rect(center=(rect.left + 20, rect.top + 20)))

        text = self.font_label.render(OBSTACLE_LABELS[obstacle.kind], True, self.COLOR_MONSTER)
        self.screen.blit(text, text.get_rect(center=(rect.centerx, rect.top + 55)))

    def _draw_power_up(self, power_up, cam):
        rect = to_rect(power_up, cam)
        drawable = self.assets.get(power_up.kind.value)
        if drawable.is_ready():
            self.screen.blit(pygame.transform.scale(drawable.image, rect.size), rect)
            return
        if power_up.kind is PowerUpKind.MINOR:
            color, mark = self.COLOR_MOVAC, "M"
        else:
            color, mark = self.COLOR_ROSTERLAB, "RL"
        pygame.draw.rect(self.screen, color, rect)
        text = self.font_ui.render(mark, True, self.COLOR_LABEL)
        self.screen.blit(text, text.get_rect(center=rect.center))

    def _draw_flying_monster(self, monster, cam):
        rect = to_rect(monster, cam)
        drawable = self.assets.get(f"monster_{monster.variant}")
        if drawable.is_ready():
            image = pygame.transform.scale(drawable.image, rect.size)
            if monster.direction < 0:
                image = pygame.transform.flip(image, True, False)
            self.screen.blit(image, rect)
            return
        bob = 3 if monster.anim_frame else 0
        pygame.gfxdraw.filled_ellipse(self.screen, rect.centerx, rect.centery + bob, rect.width // 2, rect.height // 3, self.COLOR_FLYER)
        pygame.gfxdraw.aaellipse(self.screen, rect.centerx, rect.centery + bob, rect.width // 2, rect.height // 3, self.COLOR_FLYER)

    def _draw_player(self, player, cam):
        rect = to_rect(player, cam)
        drawable = self.assets.get("player")
        if drawable.is_ready():
            image = pygame.transform.scale(drawable.image, rect.size)
            if player.facing == -1:
                image = pygame.transform.flip(image, True, False)
            self.screen.blit(image, rect)
        else:
            pygame.draw.rect(self.screen, self.COLOR_PLAYER, rect)

    def _draw_dashed_rect(self, rect, color, dash=5):
        edges = (
            (rect.topleft, rect.topright),
            (rect.topright, rect.bottomright),
            (rect.bottomright, rect.bottomleft),
            (rect.bottomleft, rect.topleft),
        )
        for (x1, y1), (x2, y2) in edges:
            length = max(abs(x2 - x1), abs(y2 - y1))
            for start in range(0, length, dash * 2):
                end = min(start + dash, length)
                a = (x1 + (x2 - x1) * start // length, y1 + (y2 - y1) * start // length)
                b = (x1 + (x2 - x1) * end // length, y1 + (y2 - y1) * end // length)
                pygame.draw.line(self.screen, color, a, b)

    # --- HUD ---

    def _render_ui(self, world):
        score_text = self.font_ui.render(f"Completed Shifts: {world.score}", True, self.COLOR_TEXT)
        self.screen.blit(score_text, (cfg.ROW_HEADER_WIDTH + 10, 8))

        tier, tier_color = difficulty_tier(world.score)
        tier_text = self.font_small.render(f"Difficulty: {tier}", True, tier_color)
        self.screen.blit(tier_text, tier_text.get_rect(topright=(self.width - 10, 10)))

        if world.score < 10 and world.running:
            hint = self.font_small.render("Move: arrows or mouse | Shoot: space or click", True, self.COLOR_HINT)
            self.screen.blit(hint, hint.get_rect(center=(self.width / 2, self.height - 20)))

        if world.player is not None and not world.running:
            overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 160))
            self.screen.blit(overlay, (0, 0))
            over = self.font_big.render("GAME OVER", True, self.COLOR_LABEL)
            self.screen.blit(over, over.get_rect(center=(self.width / 2, self.height / 2 - 20)))
            final = self.font_ui.render(f"Final score: {world.score}", True, self.COLOR_LABEL)
            self.screen.blit(final, final.get_rect(center=(self.width / 2, self.height / 2 + 25)))
